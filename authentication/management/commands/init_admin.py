from django.core.management.base import BaseCommand

from authentication.services import initialize_default_admin


class Command(BaseCommand):
    help = "Create the default ADMIN account if it does not exist yet (idempotent)."

    def handle(self, *args, **options):
        admin = initialize_default_admin()
        if admin is None:
            self.stdout.write("Default admin already exists, nothing to do.")
        else:
            self.stdout.write(self.style.SUCCESS(
                f'Created default admin "{admin.username}". Change its password immediately!'
            ))
