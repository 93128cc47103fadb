from django.core.management.base import BaseCommand, CommandError

from fares.services.fare_service import FareSession


class ConsoleDisplay:
    def __init__(self, command: BaseCommand):
        self._command = command

    def show_fare(self, fare_text: str, distance_text: str) -> None:
        self._command.stdout.write(self._command.style.SUCCESS(fare_text))
        self._command.stdout.write(distance_text)

    def show_message(self, text: str, style_tag: str) -> None:
        raise CommandError(text)


class Command(BaseCommand):
    help = "Estimate the taxi fare for a driving route between two locations"

    def add_arguments(self, parser):
        parser.add_argument("origin", help="Route origin, as free text")
        parser.add_argument("destination", help="Route destination, as free text")
        parser.add_argument(
            "--currency-prefix",
            default=None,
            help="Override the currency prefix shown before the fare",
        )

    def handle(self, *args, **options):
        session = FareSession(ConsoleDisplay(self), currency_prefix=options["currency_prefix"])
        session.request_fare(options["origin"], options["destination"])
