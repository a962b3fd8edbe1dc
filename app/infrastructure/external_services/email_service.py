"""Email service for password resets and buyer inquiries"""

import asyncio
import html
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from ...core.config import settings

logger = logging.getLogger(__name__)


class EmailService:
    """Best-effort notifier: every send returns False instead of raising."""

    def __init__(self):
        self.smtp_host = settings.SMTP_HOST
        self.smtp_port = settings.SMTP_PORT
        self.smtp_username = settings.SMTP_USERNAME
        self.smtp_password = settings.SMTP_PASSWORD
        self.smtp_use_tls = settings.SMTP_USE_TLS
        self.from_email = settings.FROM_EMAIL
        self.from_name = settings.FROM_NAME

    @property
    def enabled(self) -> bool:
        return bool(self.smtp_host)

    async def send_email(self,
                         to_email: str,
                         subject: str,
                         html_content: str,
                         text_content: Optional[str] = None,
                         reply_to: Optional[str] = None) -> bool:
        """Send email with HTML content"""
        if not self.enabled:
            logger.info("Email delivery not configured, skipping '%s'", subject)
            return False

        try:
            msg = MIMEMultipart('alternative')
            msg['Subject'] = subject
            msg['From'] = f"{self.from_name} <{self.from_email}>"
            msg['To'] = to_email
            if reply_to:
                msg['Reply-To'] = reply_to

            if text_content:
                msg.attach(MIMEText(text_content, 'plain'))
            msg.attach(MIMEText(html_content, 'html'))

            await self._send_smtp_email(msg)

            logger.info("Email '%s' sent", subject)
            return True

        except Exception:
            logger.exception("Error sending email '%s'", subject)
            return False

    async def _send_smtp_email(self, msg: MIMEMultipart):
        """Send email via SMTP"""
        def send_sync():
            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=30) as server:
                if self.smtp_use_tls:
                    server.starttls()
                if self.smtp_username and self.smtp_password:
                    server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg)

        # Run in thread pool to avoid blocking
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, send_sync)

    async def send_password_reset_email(self, email: str, reset_url: str) -> bool:
        """Send password reset email. The link carries the raw secret."""
        subject = "Reset your password"

        html_content = f"""
        <p>You requested a password reset. Click the link below to set a new password.</p>
        <p><a href="{reset_url}">{reset_url}</a></p>
        <p>This link expires in 1 hour. If you didn't request this, you can ignore this email.</p>
        """

        text_content = f"""
        You requested a password reset for your {self.from_name} account.

        Set a new password here:
        {reset_url}

        This link expires in 1 hour. If you didn't request this, you can ignore this email.
        """

        return await self.send_email(email, subject, html_content, text_content)

    async def send_inquiry_email(self,
                                 seller_email: str,
                                 seller_name: str,
                                 buyer_name: str,
                                 buyer_email: str,
                                 message: str,
                                 listing_title: str,
                                 listing_url: str) -> bool:
        """Relay a buyer inquiry to the seller; replies go straight to the buyer"""
        subject = f'New inquiry on "{listing_title}"'

        safe_buyer = html.escape(buyer_name)
        safe_message = html.escape(message).replace("\n", "<br/>")

        html_content = f"""
        <p>Hi {html.escape(seller_name)},</p>
        <p>You have a new inquiry on your listing <strong>{html.escape(listing_title)}</strong>.</p>
        <hr />
        <p><strong>From:</strong> {safe_buyer} ({html.escape(buyer_email)})</p>
        <p><strong>Message:</strong></p>
        <blockquote style="border-left:3px solid #ccc;padding-left:12px;color:#555">{safe_message}</blockquote>
        <hr />
        <p>Reply directly to this email to respond to {safe_buyer}.</p>
        <p><a href="{listing_url}">View listing</a></p>
        """

        text_content = f"""
        Hi {seller_name},

        You have a new inquiry on your listing "{listing_title}".

        From: {buyer_name} ({buyer_email})

        {message}

        Reply directly to this email to respond to {buyer_name}.
        View listing: {listing_url}
        """

        return await self.send_email(
            seller_email, subject, html_content, text_content, reply_to=buyer_email
        )
