"""Command-line entry point for membership reconciliation.

    python -m civiconnect.reconcile --dry-run
"""
import argparse
import logging

from civiconnect.config import settings
from civiconnect.database import SessionLocal
from civiconnect.logging_config import setup_logging
from civiconnect.services.reconciliation_service import reconcile_memberships

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Rebuild event membership sets from join records.")
    parser.add_argument("--dry-run", action="store_true", help="Report drift without writing fixes.")
    args = parser.parse_args(argv)

    setup_logging(settings.LOG_LEVEL)
    with SessionLocal() as db:
        result = reconcile_memberships(db, dry_run=args.dry_run)
    logger.info("users_fixed=%(users_fixed)d events_fixed=%(events_fixed)d dry_run=%(dry_run)s", result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
