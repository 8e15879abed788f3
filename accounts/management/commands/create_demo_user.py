from django.core.management.base import BaseCommand
from accounts.models import User


class Command(BaseCommand):
    help = "Create (or reset the password of) a local development account"

    def add_arguments(self, parser):
        parser.add_argument("--email", default="demo@example.com", help="Account email")
        parser.add_argument("--password", default="demopassword", help="Account password")

    def handle(self, *args, **options):
        email = options["email"].lower()
        user = User.objects.get_by_email(email)
        if user is None:
            user = User.objects.create_user(email=email, password=options["password"])
            self.stdout.write(self.style.SUCCESS(f"Created demo user {email}"))
        else:
            user.set_password(options["password"])
            user.save(update_fields=["password"])
            self.stdout.write(self.style.SUCCESS(f"Reset password for {email}"))
