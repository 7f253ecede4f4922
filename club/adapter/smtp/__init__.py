"""SMTP mail adapter."""

from .mailer import MockMailer, SentMail, SmtpMailer

__all__ = ["MockMailer", "SentMail", "SmtpMailer"]
