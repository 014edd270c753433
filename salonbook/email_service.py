"""
Email Service using Resend
Compiles MJML templates to HTML and hands them to Resend
"""

import asyncio
import logging
from typing import Union

import resend
from mjml import mjml_to_html

from .config import Settings

logger = logging.getLogger(__name__)


def compile_mjml_to_html(mjml_content: str) -> str:
    """Compile MJML template to production-ready HTML"""
    try:
        result = mjml_to_html(mjml_content)
        # Newer releases return a result object, older ones a dict
        if isinstance(result, dict):
            if result.get("errors"):
                logger.warning(f"MJML compilation warnings: {result['errors']}")
            return result.get("html", "")
        if getattr(result, "errors", None):
            logger.warning(f"MJML compilation warnings: {result.errors}")
        return getattr(result, "html", str(result))
    except Exception as e:
        logger.error(f"MJML compilation error: {e}")
        raise Exception(f"Failed to compile MJML template: {str(e)}") from e


async def send_email(
    to: Union[str, list[str]],
    subject: str,
    mjml_content: str,
    settings: Settings,
) -> dict:
    """
    Send an email through Resend

    Args:
        to: Recipient email(s)
        subject: Email subject line
        mjml_content: MJML template content (will be compiled to HTML)
        settings: Provides the Resend key and sender address

    Returns:
        Send response dict
    """
    html_content = compile_mjml_to_html(mjml_content)
    recipients = [to] if isinstance(to, str) else to

    if not settings.resend_api_key:
        logger.error("❌ No email service configured - RESEND_API_KEY missing")
        raise Exception("Email service not configured")

    resend.api_key = settings.resend_api_key

    try:
        logger.info(f"📧 Sending email via Resend to: {to}")
        email_data = {
            "from": settings.email_from_address,
            "to": recipients,
            "subject": subject,
            "html": html_content,
        }
        # The Resend client is blocking
        response = await asyncio.to_thread(resend.Emails.send, email_data)
        logger.info(f"✅ Email sent successfully via Resend: {response}")
        return response
    except Exception as e:
        logger.error(f"❌ Email send error to {recipients}: {e}")
        raise Exception(f"Failed to send email: {str(e)}") from e
