"""
Application startup validation and initialization.

This module performs startup checks so that a misconfigured reporting
service is reported in the logs before it starts serving requests.
"""

import logging
import os
import sys
from typing import List, Tuple

import pytz

from core.config import settings

logger = logging.getLogger(__name__)


class StartupValidator:
    """Validates application startup requirements"""

    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def check_report_timezone(self) -> bool:
        """Check the report timezone resolves to a known zone"""
        try:
            tz = settings.report_tz
        except pytz.UnknownTimeZoneError:
            self.errors.append(
                f"Unknown report timezone: {settings.analytics_report_timezone}"
            )
            return False
        logger.info(f"Report timezone: {tz.zone}")
        return True

    def check_order_source(self) -> bool:
        """Check the seed file for the default order repository"""
        seed_file = settings.analytics_orders_seed_file
        if not seed_file:
            self.warnings.append(
                "ANALYTICS_ORDERS_SEED_FILE not set - reports will be empty "
                "until an order repository is provided"
            )
            return True

        if not os.path.isfile(seed_file):
            self.errors.append(f"Order seed file not found: {seed_file}")
            return False
        return True

    def check_report_cache(self) -> bool:
        if not settings.analytics_report_cache_enabled:
            self.warnings.append("Report cache disabled - every request recomputes")
        return True

    def validate_all(self) -> Tuple[bool, List[str], List[str]]:
        """Run all validation checks"""
        checks = [
            ("Report Timezone", self.check_report_timezone),
            ("Order Source", self.check_order_source),
            ("Report Cache", self.check_report_cache),
        ]

        all_passed = True

        for check_name, check_func in checks:
            logger.info(f"Running check: {check_name}")
            if not check_func():
                all_passed = False

        return all_passed, self.errors, self.warnings


def run_startup_checks():
    """Run all startup validation checks"""
    logger.info("=" * 60)
    logger.info("Starting sales analytics service")
    logger.info(f"Environment: {settings.environment}")
    logger.info("=" * 60)

    validator = StartupValidator()
    passed, errors, warnings = validator.validate_all()

    if warnings:
        logger.warning("Startup Warnings:")
        for warning in warnings:
            logger.warning(f"  {warning}")

    if errors:
        logger.error("Startup Errors:")
        for error in errors:
            logger.error(f"  {error}")

    if not passed and settings.is_production:
        logger.error("Cannot start in production with errors!")
        sys.exit(1)
    elif not passed:
        logger.warning("Starting in development mode despite errors")
    else:
        logger.info("All startup checks passed")

    return passed, warnings


def configure_startup_logging():
    """Configure logging for startup"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
