from django.core.management.base import BaseCommand
from apps.push.services import PushService


class Command(BaseCommand):
    help = 'Broadcast a push notification to every stored subscription'

    def add_arguments(self, parser):
        parser.add_argument('title', nargs='?', default='Test Header')
        parser.add_argument('body', nargs='?', default='This is a test notification from the server!')

    def handle(self, *args, **options):
        result = PushService.broadcast(options['title'], options['body'])

        self.stdout.write(
            self.style.SUCCESS(
                f"Sent {result['successCount']}, failed {result['failCount']}, "
                f"pruned {result['pruned']}"
            )
        )
