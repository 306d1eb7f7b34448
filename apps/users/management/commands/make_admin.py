from django.core.management.base import BaseCommand, CommandError
from apps.users.models import User


class Command(BaseCommand):
    help = 'Grant admin rights to a user, optionally creating or resetting the account'

    def add_arguments(self, parser):
        parser.add_argument('--email', required=True, help='Email of the account')
        parser.add_argument(
            '--password',
            help='Create the account if missing and set this password',
        )
        parser.add_argument('--name', default='', help='Display name for a new account')
        parser.add_argument(
            '--revoke',
            action='store_true',
            help='Remove admin rights instead of granting them',
        )

    def handle(self, *args, **options):
        email = options['email']
        password = options.get('password')
        user = User.objects.get_by_email(email)

        if user is None:
            if not password:
                raise CommandError(f'User {email} not found (pass --password to create it)')
            user = User.objects.create_user(
                email=email,
                password=password,
                name=options['name'] or 'Admin User',
            )
            self.stdout.write(f'Created user {user.email}')
        elif password:
            user.set_password(password)
            self.stdout.write(f'Password reset for {user.email}')

        user.is_admin = not options['revoke']
        user.save()

        self.stdout.write(
            self.style.SUCCESS(f'User {user.email}: is_admin={user.is_admin}')
        )
