import logging

from django.conf import settings
from django.db import IntegrityError, transaction

from .models import User

logger = logging.getLogger(__name__)


def initialize_default_admin():
    """
    Create the bootstrap ADMIN account if no user with the configured
    username exists yet.

    Safe to run on every deploy: returns the new user when one was created
    and ``None`` when the account is already there.
    """
    username = settings.DEFAULT_ADMIN_USERNAME

    if User.objects.filter(username=username).exists():
        logger.info("Default admin '%s' already exists", username)
        return None

    try:
        with transaction.atomic():
            admin = User.objects.create_user(
                username=username,
                password=settings.DEFAULT_ADMIN_PASSWORD,
                role=User.Role.ADMIN,
                full_name=settings.DEFAULT_ADMIN_FULL_NAME,
            )
    except IntegrityError:
        # Another process created it between the check and the insert
        logger.info("Default admin '%s' created concurrently", username)
        return None

    logger.info("Created default admin '%s'. Change its password immediately!", username)
    return admin
