from __future__ import annotations

from datetime import timedelta

from django.conf import settings
from django.core.management.base import BaseCommand

from modules.core.tokens import issue_token


class Command(BaseCommand):
    help = "Print a signed bearer token for local development."

    def add_arguments(self, parser):
        parser.add_argument("--sub", required=True, help="Token subject.")
        parser.add_argument(
            "--role",
            default=settings.ADMIN_ROLE,
            help="Role claim (default: %(default)s).",
        )
        parser.add_argument(
            "--minutes",
            type=int,
            default=settings.JWT_ACCESS_TOKEN_LIFETIME_MINUTES,
            help="Lifetime in minutes (default: %(default)s).",
        )

    def handle(self, *args, **options):
        token = issue_token(
            options["sub"],
            options["role"],
            lifetime=timedelta(minutes=options["minutes"]),
        )
        self.stderr.write(
            self.style.SUCCESS(
                f"Token issued: sub={options['sub']}, role={options['role']}, "
                f"minutes={options['minutes']}"
            )
        )
        self.stdout.write(token)
