import argparse
import sys
from config import SITE_URL
from models.errors import DateCheckError
from workflows.patent_dates import run_date_check


def main(argv=None) -> int:
    """Main entry point: report filing, publication and grant dates for a patent search."""

    # Parse CLI arguments
    parser = argparse.ArgumentParser(
        description='Look up a patent and report the days between its filing, publication and grant dates')
    parser.add_argument('search_term', nargs='?',
                        help='Term to search for (defaults to the example in the search box placeholder)')
    args = parser.parse_args(argv)

    print("=" * 60)
    print("Patent Date Checker")
    print("=" * 60)
    print(f"Site: {SITE_URL}")
    print("=" * 60)

    try:
        run_date_check(args.search_term)
    except DateCheckError:
        # Already reported by the observer
        return 1

    print("\nAutomation completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
