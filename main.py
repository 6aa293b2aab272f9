#!/usr/bin/env python3
"""Command-line entry point: parse StatsD lines from a file or stdin into JSON records"""
import sys
import time
from config import Config
from statsd_metrics.ingest import PayloadIngestor
from logging_config import setup_fallback_logging, setup_structured_logging, get_logger, log_startup, log_ingest_summary, log_error

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_FAILURE = 2


def read_payload(config: Config) -> bytes:
    """Read the raw payload from the configured file, or stdin"""
    if config.input_file:
        return config.input_file.read_bytes()
    return sys.stdin.buffer.read()


def main() -> int:
    """Main application entry point"""
    setup_fallback_logging()
    
    try:
        config = Config()
        setup_structured_logging(config)
        logger = get_logger(__name__)
        log_startup(logger, config)
        
        payload = read_payload(config)
        
        start = time.monotonic()
        result = PayloadIngestor(config).ingest(payload)
        for metric in result.metrics:
            sys.stdout.write(metric.to_json() + "\n")
        sys.stdout.flush()
        
        log_ingest_summary(logger, result.accepted_count, result.rejected_count, time.monotonic() - start)
        return EXIT_OK if result.ok else EXIT_REJECTED
        
    except Exception as e:
        logger = get_logger(__name__)
        log_error(logger, e, {"component": "main"})
        return EXIT_FAILURE


def run():
    sys.exit(main())


if __name__ == '__main__':
    run()
