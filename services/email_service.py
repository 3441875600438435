"""Outbound email through Flask-Mail."""
from flask import current_app
from flask_mail import Message

from extensions import mail


def send_email(recipient: str, subject: str, body: str) -> None:
    """Send a plain-text email. Delivery errors propagate to the caller."""
    msg = Message(
        subject=subject,
        sender=current_app.config['MAIL_DEFAULT_SENDER'],
        recipients=[recipient]
    )
    msg.body = body
    mail.send(msg)
    current_app.logger.info(f'Email "{subject}" sent to {recipient}')
