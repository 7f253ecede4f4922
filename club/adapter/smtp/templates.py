"""HTML bodies for membership emails."""

from html import escape


def approval_email(username: str, club_name: str) -> tuple[str, str]:
    """Subject and HTML body for an approved membership."""
    subject = f"Membership Approved - Welcome to the {club_name}!"
    body = f"""
        <p>Hi <b>{escape(username)}</b>,</p>
        <p>Congratulations! Your membership has been approved. Welcome to the {escape(club_name)}! We're excited to have you on board.</p>
        <p>Explore the posts, participate in discussions, and let's build amazing projects together!</p>
    """
    return subject, body


def rejection_email(username: str, club_name: str) -> tuple[str, str]:
    """Subject and HTML body for a rejected membership."""
    subject = f"Membership Request Status - {club_name}"
    body = f"""
        <p>Hi <b>{escape(username)}</b>,</p>
        <p>Your membership request has unfortunately been rejected. If you believe this is an error or want to discuss eligibility, please contact the admin team.</p>
        <p>Regards,<br/>{escape(club_name)}</p>
    """
    return subject, body
