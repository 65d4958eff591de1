from flask import current_app
from flask_mail import Message, Mail
from threading import Thread

mail = Mail()


def send_async_email(app, msg):
    with app.app_context():
        try:
            mail.send(msg)
        except Exception as e:
            app.logger.error(f"Failed to send email: {e}")


def send_announcement_email(event, announcement, recipients):
    """Send an event announcement to every registrant (addresses go in Bcc)"""
    app = current_app._get_current_object()
    subject = f"Announcement - {event.name}"

    # If in testing mode or no mail server is configured, log the email instead of sending it
    if app.testing or not app.config.get("MAIL_SERVER"):
        app.logger.info("--- MOCK ANNOUNCEMENT EMAIL ---")
        app.logger.info(f"Bcc: {', '.join(recipients)}")
        app.logger.info(f"Subject: {subject}")
        app.logger.info(f"Body: {announcement.message}")
        app.logger.info("--- END MOCK ANNOUNCEMENT EMAIL ---")
        return

    msg = Message(
        subject,
        sender=("Event Hub", app.config.get("MAIL_DEFAULT_SENDER") or app.config.get("MAIL_USERNAME")),
        bcc=list(recipients),
    )

    msg.body = f"""
Hello,

There is a new announcement for "{event.name}" ({event.date.strftime('%B %d, %Y')}):

{announcement.message}

You are receiving this email because you registered for this event.
"""

    Thread(target=send_async_email, args=(app, msg)).start()
