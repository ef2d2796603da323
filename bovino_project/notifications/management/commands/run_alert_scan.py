"""
notifications/management/commands/run_alert_scan.py

Cron entry point (hourly):
- herd alerts: upcoming births, pending dewormings
- user-scheduled reminders due in about one hour

Both scans are idempotent through persisted state changes, so running
the command again right away sends nothing new.
"""

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from notifications.services import check_animal_alerts, send_due_reminders
from notifications.services.alerts import StoreQueryFailed


SCANS = {
    "animals": check_animal_alerts,
    "reminders": send_due_reminders,
}


class Command(BaseCommand):
    help = "Send due herd alerts and scheduled reminders"

    def add_arguments(self, parser):
        parser.add_argument(
            "--only",
            choices=sorted(SCANS),
            help="Run a single scan instead of both",
        )

    def handle(self, *args, **options):
        now = timezone.now()
        names = [options["only"]] if options.get("only") else list(SCANS)

        self.stdout.write(
            self.style.NOTICE(
                f"[{timezone.localtime(now):%Y-%m-%d %H:%M:%S}] Starting alert scan: {', '.join(names)}"
            )
        )

        failed = []
        for name in names:
            try:
                result = SCANS[name](now=now)
            except StoreQueryFailed as exc:
                failed.append(name)
                self.stderr.write(self.style.ERROR(f"{name}: {exc}"))
                continue

            for line in result.details:
                self.stdout.write(f"  {line}")
            for line in result.failed:
                self.stdout.write(self.style.WARNING(f"  {line}"))

            self.stdout.write(
                self.style.SUCCESS(
                    f"{name}: {result.sent} sent, "
                    f"{len(result.failed)} failed, "
                    f"{len(result.skipped)} skipped"
                )
            )

        if failed:
            raise CommandError(f"Scan aborted for: {', '.join(failed)}")
