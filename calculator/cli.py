#!/usr/bin/env python3
"""
Terminal Calculator
Interactive prompt loop: two numbers, an operator, then continue, view
history, clear history or quit.
"""

import argparse
import logging
import sys

from calculator.configs import load_config
from calculator.core.session import CalculationSession
from calculator.services.input_loop import InputLoop

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

def main(argv=None) -> int:
    """Main entry point for the terminal calculator"""
    parser = argparse.ArgumentParser(description="Interactive terminal calculator")
    parser.add_argument("--config", help="Path to a JSON or YAML configuration file")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        help="Logging level (default: WARNING)")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        if args.log_level:
            config.log_level = args.log_level
        logging.basicConfig(
            level=config.log_level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    except ValueError as e:
        parser.error(str(e))

    session = CalculationSession(max_size=config.max_history_size)
    loop = InputLoop(session, config=config.terminal)
    loop.run()

    logger.info(f"Session ended after {len(session)} stored calculations")
    sys.stdout.flush()
    return 0

if __name__ == "__main__":
    sys.exit(main())
