"""
Background scheduler for the coin ledger
Handles:
- Automatic daily bonus after midnight (UTC)
"""

import logging
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from dodocoin.database import SessionLocal
from dodocoin.exceptions import CoinLedgerException
from dodocoin.services.date_service import DateService
from dodocoin.services.ledger_service import Ledger
from dodocoin.services.storage_service import DatabaseStore

logger = logging.getLogger("dodocoin.scheduler")

# Create scheduler instance
scheduler = AsyncIOScheduler()


def grant_daily_bonus_job(session_factory=SessionLocal) -> bool:
    """
    Grant today's daily bonus if it has not been granted yet.

    Returns:
        True if a bonus was granted by this run
    """
    db = session_factory()
    try:
        ledger = Ledger(DatabaseStore(db))
        transaction = ledger.grant_daily_bonus(DateService.today())
        if transaction:
            logger.info(f"Auto daily bonus granted, balance {ledger.balance}")
        return transaction is not None
    except CoinLedgerException as e:
        logger.error(f"Scheduler Error (Daily Bonus): {e}")
        return False
    finally:
        db.close()


async def run_auto_daily_bonus():
    """Job: daily bonus. The ledger gate makes repeated runs no-ops."""
    grant_daily_bonus_job()


def start_scheduler():
    """Start the scheduler"""
    if not scheduler.running:
        # Checked every minute; only the first run of a day changes state
        trigger = CronTrigger(minute='*')

        scheduler.add_job(
            run_auto_daily_bonus,
            trigger,
            id='auto_daily_bonus',
            replace_existing=True
        )

        scheduler.start()
        logger.info(">>> APScheduler STARTED <<<")
        logger.info(f"Scheduled jobs: {[job.id for job in scheduler.get_jobs()]}")


def stop_scheduler():
    """Stop the scheduler"""
    if scheduler.running:
        scheduler.shutdown()
        logger.info("APScheduler stopped")
