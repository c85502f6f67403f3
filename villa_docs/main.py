"""
Command line runner for the daily document reminder job.
"""
import click
import requests
from typing import Optional

from .guest_communications.notifier import Notifier
from .api.services.reminder_service import ReminderService
from .wordpress.client import WordPressClient
from .utils.logger import setup_logger
from config.settings import app_config


class ReminderRunner:
    """Runs the reminder scheduler in-process or against a deployed API."""

    def __init__(self, log_level: str = "INFO", log_file: Optional[str] = None):
        self.logger = setup_logger("document_reminders", log_level, log_file)
        self.reminder_service = ReminderService(WordPressClient(), Notifier(), self.logger)

    def run_local(self, dry_run: bool = False) -> dict:
        result = self.reminder_service.process_document_reminders(dry_run=dry_run)
        self.reminder_service.reminder_logger.print_summary()
        return result.to_dict()

    def run_remote(self, api_url: str, api_key: str, timeout: int = 60) -> dict:
        """Call the scheduler endpoint of a deployed instance."""
        url = f"{api_url.rstrip('/')}/scheduler/document-reminders"
        self.logger.info("Calling API", url=url)
        response = requests.post(
            url,
            headers={"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"},
            timeout=timeout,
        )
        if response.status_code != 200:
            raise click.ClickException(f"Received HTTP code {response.status_code}: {response.text}")
        return response.json()


@click.command()
@click.option('--api-url', envvar='REMINDER_API_URL', default=None,
              help='Base URL of a deployed API (e.g. https://documents.villa-claudia.eu/api); runs locally when omitted')
@click.option('--api-key', envvar='SCHEDULER_API_KEY', default=None,
              help='Scheduler bearer secret for --api-url')
@click.option('--dry-run', is_flag=True, help='Select bookings without sending emails')
@click.option('--log-level', default=app_config.log_level,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.option('--log-file', default=None, help='Log file path')
def main(api_url, api_key, dry_run, log_level, log_file):
    """
    Villa Claudia document reminders.

    Emails guests checking in about a week from now who have not uploaded
    their travel documents yet.
    """
    runner = ReminderRunner(log_level, log_file)
    try:
        if api_url:
            if dry_run:
                raise click.UsageError("--dry-run is only supported for local runs")
            if not api_key:
                raise click.UsageError("--api-key (or SCHEDULER_API_KEY) is required with --api-url")
            results = runner.run_remote(api_url, api_key)
        else:
            results = runner.run_local(dry_run=dry_run)
    except click.ClickException:
        raise
    except Exception as e:
        click.echo(f"Fatal error: {str(e)}")
        click.get_current_context().exit(1)

    click.echo("\nDocument reminders processed:")
    click.echo(f"  Processed: {results.get('processed', 0)} bookings")
    click.echo(f"  Sent: {results.get('sent', 0)} reminders")
    click.echo(f"  Failed: {results.get('failed', 0)} reminders")

    if dry_run:
        click.echo("\n⚠️  DRY RUN MODE - No reminder emails were sent")


if __name__ == "__main__":
    main()
