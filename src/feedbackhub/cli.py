"""Command-line interface for FeedbackHub."""

import argparse
import json
import logging
import subprocess
import sys
from pathlib import Path

from .core.config import settings
from .core.constants import FileConstants
from .services.feedback_store import ALL_PRODUCTS, FeedbackStore
from .services.insights import InsightService
from .utils.data_prep import export_to_json, to_json

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT,
        stream=sys.stderr,
    )


def open_store(args) -> FeedbackStore:
    store = FeedbackStore(args.database_url)
    store.create_schema()
    return store


def cmd_init_db(args):
    """Create the feedback table."""
    open_store(args)
    print(f"Feedback table ready at {args.database_url or settings.database_url}")


def cmd_seed(args):
    """Load feedback rows from a JSON file."""
    store = open_store(args)
    count = store.load_json(args.input_file)
    print(f"Inserted {count} feedback rows from {args.input_file}")


def cmd_products(args):
    """List products with feedback."""
    store = open_store(args)
    print(to_json({"products": store.list_products()}))


def cmd_feedback(args):
    """Show raw feedback rows."""
    store = open_store(args)
    product = (args.product or ALL_PRODUCTS).lower()
    records = store.fetch_feedback(product)
    print(to_json({
        "product": product,
        "count": len(records),
        "results": [r.to_dict() for r in records],
    }))


def cmd_insights(args):
    """Generate insights for one product or all of them."""
    service = InsightService(open_store(args))
    payload = service.query(args.product)

    if args.out:
        export_to_json(payload, args.out)
        print(f"Results exported to {args.out}")
    else:
        print(to_json(payload))


def cmd_ui(args):
    """UI command."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"

    if not app_path.exists():
        print(f"Streamlit app not found at {app_path}")
        return

    print("Launching FeedbackHub UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
    except KeyboardInterrupt:
        print("\nUI stopped by user")


COMMANDS = {
    "init-db": cmd_init_db,
    "seed": cmd_seed,
    "products": cmd_products,
    "feedback": cmd_feedback,
    "insights": cmd_insights,
    "ui": cmd_ui,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="FeedbackHub - Product Feedback Insights")
    parser.add_argument('--db', dest='database_url', help='SQLAlchemy database URL (default from settings)')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('init-db', help='Create the feedback table')

    seed_parser = subparsers.add_parser('seed', help='Load feedback from a JSON file')
    seed_parser.add_argument('--in', dest='input_file', required=True, help='JSON array of {product, source, comment}')

    subparsers.add_parser('products', help='List products with feedback')

    feedback_parser = subparsers.add_parser('feedback', help='Show raw feedback')
    feedback_parser.add_argument('--product', default=ALL_PRODUCTS, help='Product name or "all"')

    insights_parser = subparsers.add_parser('insights', help='Generate insights')
    insights_parser.add_argument('--product', default=ALL_PRODUCTS, help='Product name or "all"')
    insights_parser.add_argument('--out', help='Output JSON file')

    subparsers.add_parser('ui', help='Launch web UI')
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        COMMANDS[args.command](args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except FileNotFoundError as e:
        print(f"Error: Input file not found: {e.filename}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
