"""Entry point for the enhanced transaction history exporter"""
import argparse
import json
import logging
import sys
import traceback
from typing import List, Optional

from solana_history.config import Settings, settings
from solana_history.history import EnhancedHistory
from solana_history.models.request import HistoryRequest

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='solana-history',
        description='Fetch enhanced Solana transaction history from Helius and export it as JSON'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    history = subparsers.add_parser('history', help='Fetch enhanced historical transactions for a specific address')
    history.add_argument('address', help='The address to query')
    history.add_argument('-l', '--limit', type=int, default=None,
                         help=f'Maximum number of transactions to fetch (default: {settings.DEFAULT_LIMIT})')
    history.add_argument('-o', '--output-dir', default=None,
                         help=f'Output directory for JSON files (default: {settings.OUTPUT_DIR})')
    history.add_argument('--before', help='Start searching backwards from this transaction signature')
    history.add_argument('--until', help='Search until this transaction signature')
    history.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')

    subparsers.add_parser('config', help='Show current configuration')
    return parser

def run_history(args: argparse.Namespace, base_settings: Settings) -> None:
    """Fetch, decode and export history for one address"""
    run_settings = base_settings
    if args.output_dir:
        run_settings = base_settings.model_copy(update={'OUTPUT_DIR': args.output_dir})

    request = HistoryRequest(limit=args.limit, before=args.before, until=args.until)
    limit = run_settings.DEFAULT_LIMIT if request.limit is None else request.limit
    logger.info(f"Fetching enhanced transactions for address: {args.address}")
    logger.info(f"Limit: {limit} transactions\n")

    history = EnhancedHistory(run_settings)
    result = history.generate(args.address, request)

    if args.verbose:
        history.display_summary(result.transactions)
    else:
        logger.info(f"\nSuccessfully processed {len(result.transactions)} transactions")
        logger.info(f"Data exported to: {result.output_path}")

def show_config(base_settings: Settings) -> None:
    """Log configuration, masking the API key"""
    safe_config = base_settings.model_dump(exclude={'HELIUS_API_KEY'})
    safe_config['HELIUS_API_KEY'] = '***set***' if base_settings.HELIUS_API_KEY else 'not set'
    logger.info("Current configuration:")
    logger.info(json.dumps(safe_config, indent=2))
    if not base_settings.HELIUS_API_KEY:
        logger.info("Set HELIUS_API_KEY in the environment or a .env file to fetch history.")

def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    verbose = getattr(args, 'verbose', False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format='%(message)s')

    try:
        if args.command == 'history':
            run_history(args, settings)
        else:
            show_config(settings)
    except KeyboardInterrupt:
        logger.info("\nReceived interrupt. Shutting down...")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        traceback.print_exc()
        sys.exit(1)

    sys.exit(0)

if __name__ == "__main__":
    main()
