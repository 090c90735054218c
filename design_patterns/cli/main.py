"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Section selection and listing
- Integration with the application bootstrap
"""
import argparse
import os
import sys
from typing import List, Optional

from design_patterns import __version__
from design_patterns.bootstrap import Application
from design_patterns.config.manager import ConfigurationManager
from design_patterns.domain.core.exceptions import DomainException
from design_patterns.infrastructure.logging.logger import get_logger
from design_patterns.interface.demo_sections import SECTIONS

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "design-patterns",
        description="Design patterns showcase - runs one small demonstration per pattern",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # Run every section
  %(prog)s --section pipeline --section result
  %(prog)s --list-sections                   # Show section keys
  %(prog)s --log-level DEBUG                 # Diagnostics on stderr
        """
    )

    parser.add_argument('--config', help='Configuration file path (JSON)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--section', action='append', dest='sections', metavar='NAME',
                        help='Run only this section (repeatable)')
    parser.add_argument('--list-sections', action='store_true',
                        help='List section keys and exit')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    if args.list_sections:
        for section in SECTIONS:
            print(section.key)
        return 0

    overrides = {}
    if args.log_level:
        overrides["logging"] = {"level": args.log_level}

    try:
        config_manager = ConfigurationManager(config_file=args.config, overrides=overrides)
        app = Application(config_manager=config_manager)
        app.run(args.sections)
        return 0
    except DomainException as e:
        logger.debug("Demonstration aborted", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
