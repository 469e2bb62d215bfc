"""
Command line entry point running a single resource operation.

Usage:
    python -m tf_aws_handlers RESOURCE_TYPE OPERATION [--id ID] [--config FILE] [--state FILE]
                              [--region REGION] [--verbose]
"""

import argparse
import json
import logging
import sys

from tf_aws_handlers.config import Config
from tf_aws_handlers.context import ExecutionContext
from tf_aws_handlers.errors import HandlerError
from tf_aws_handlers.provider import OPERATIONS, RESOURCES, run_operation

logger = logging.getLogger(__name__)

def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Run a lifecycle operation of an AWS resource handler')
    parser.add_argument('resource_type', choices=sorted(RESOURCES),
                        help='Resource type')
    parser.add_argument('operation', choices=OPERATIONS,
                        help='Lifecycle operation')
    parser.add_argument('--id', type=str, default='',
                        help='Stored resource id (the capacity provider name for import)')
    parser.add_argument('--config', type=str, default=None,
                        help='JSON file with the resource configuration')
    parser.add_argument('--state', type=str, default=None,
                        help='JSON file with the prior resource state')
    parser.add_argument('--region', type=str, default=None,
                        help='AWS region, overrides AWS_REGION')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable verbose logging')
    return parser.parse_args(argv)

def load_json(path):
    if path is None:
        return None
    with open(path) as f:
        return json.load(f)

def main(argv=None, execution_context=None):
    """Main function."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = load_json(args.config)
        state = load_json(args.state)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load input: {str(e)}")
        return 1

    if execution_context is None:
        settings = Config.get_config()
        if args.region:
            settings['AWS_REGION'] = args.region
        try:
            execution_context = ExecutionContext.from_config(settings)
        except HandlerError as e:
            logger.error(f"Failed to resolve AWS context: {str(e)}")
            return 1

    result = run_operation(
        args.resource_type,
        args.operation,
        execution_context,
        id=args.id or (state or {}).get('id', ''),
        config=config,
        state=state
    )
    print(json.dumps(result.to_dict(), indent=2, sort_keys=True))
    return 0 if result.ok else 1

if __name__ == "__main__":
    sys.exit(main())
