"""
HTML email bodies sent by the document portal.
"""
from datetime import datetime
from html import escape
from typing import Optional

from ..utils.models import UploadSubmission, document_type_label
from config.settings import app_config

HEADER_STYLE = "background-color: #1e40af; color: white; padding: 20px; text-align: center;"
BODY_STYLE = "padding: 20px; border: 1px solid #e5e7eb; border-top: none;"
FOOTER_STYLE = "background-color: #f3f4f6; padding: 15px; text-align: center; font-size: 12px; color: #6b7280;"
BUTTON_STYLE = ("background-color: #1e40af; color: white; padding: 12px 24px; "
                "text-decoration: none; border-radius: 4px; font-weight: bold;")
CELL_STYLE = "padding: 8px; border: 1px solid #ddd;"
HEAD_CELL_STYLE = "padding: 8px; text-align: left; border: 1px solid #ddd; background-color: #f2f2f2;"


def format_file_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1048576:
        return f"{size / 1024:.1f} KB"
    return f"{size / 1048576:.1f} MB"


def _layout(title: str, content: str) -> str:
    site = app_config.site_url
    return f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
      <div style="{HEADER_STYLE}">
        <h1 style="margin: 0;">{title}</h1>
      </div>
      <div style="{BODY_STYLE}">
        {content}
      </div>
      <div style="{FOOTER_STYLE}">
        <p>&copy; {datetime.now().year} Villa Claudia. All rights reserved.</p>
        <p><a href="{site}" style="color: #6b7280; text-decoration: underline;">{site.split('//')[-1]}</a></p>
      </div>
    </div>
    """


def _greeting(name: Optional[str]) -> str:
    return f"<p>Hello{' ' + escape(name) if name else ''},</p>"


def _button(link: str, label: str) -> str:
    return (f'<div style="text-align: center; margin: 30px 0;">'
            f'<a href="{escape(link, quote=True)}" style="{BUTTON_STYLE}">{label}</a></div>')


def upload_notification(submission: UploadSubmission) -> str:
    """Administrator notification listing travelers and attached documents."""
    travelers_html = "".join(
        f'<li style="margin-bottom: 5px;">{escape(t.name)} '
        f'({escape(document_type_label(t.document_type))}: {escape(t.document_number)})</li>'
        for t in submission.travelers
    )
    headings = ["Traveler Name", "Document Type", "Document Number", "Filename", "Type", "Size"]
    head_html = "".join(f'<th style="{HEAD_CELL_STYLE}">{h}</th>' for h in headings)
    rows_html = "".join(
        "<tr>" + "".join(
            f'<td style="{CELL_STYLE}">{escape(value)}</td>'
            for value in (
                f.traveler_name,
                document_type_label(f.document_type),
                f.document_number,
                f.original_name,
                f.content_type,
                format_file_size(f.size),
            )
        ) + "</tr>"
        for f in submission.files
    )
    content = f"""
        <h2>New Documents Uploaded</h2>
        <h3>Booking Information</h3>
        <p><strong>Booking ID:</strong> {escape(submission.booking_id)}</p>
        <p><strong>Lead Guest Name:</strong> {escape(submission.guest_name)}</p>
        <p><strong>Contact Email:</strong> {escape(submission.guest_email or "Not provided")}</p>
        <h3>Travelers</h3>
        <ul style="padding-left: 20px;">{travelers_html}</ul>
        <h3>Documents</h3>
        <table style="width: 100%; border-collapse: collapse; margin-top: 10px;">
          <thead><tr>{head_html}</tr></thead>
          <tbody>{rows_html}</tbody>
        </table>
        <p style="margin-top: 20px;">
          The uploaded documents are attached to this email. They are not stored on our servers for security reasons.
        </p>
        <p>This is an automated notification. Please do not reply to this email.</p>
    """
    return _layout("Villa Claudia - Document Upload Notification", content)


def document_request(guest_name: Optional[str], stay_start: datetime, upload_link: str) -> str:
    """Reminder asking the guest to upload travel documents."""
    formatted_date = f"{stay_start:%A, %B} {stay_start.day}, {stay_start.year}"
    content = f"""
        {_greeting(guest_name)}
        <p>Thank you for booking your stay at Villa Claudia, starting on <strong>{formatted_date}</strong>!</p>
        <p>For legal requirements, we need a copy of your passport or travel ID document for all guests.</p>
        <p>Please click the button below to securely upload your documents:</p>
        {_button(upload_link, "Upload Documents")}
        <p>If you have any questions, please don't hesitate to contact us.</p>
        <p>Best regards,<br>Villa Claudia Team</p>
    """
    return _layout("Villa Claudia", content)


def magic_link(name: Optional[str], link: str, valid_hours: int) -> str:
    content = f"""
        {_greeting(name)}
        <p>Thank you for booking your stay at Villa Claudia!</p>
        <p>For legal requirements, we need a copy of your passport or travel ID document.</p>
        <p>Please click the button below to securely upload your documents:</p>
        {_button(link, "Upload Documents")}
        <p>This link will expire in {valid_hours} hours for security reasons.</p>
        <p>If you didn't request this email, please ignore it.</p>
        <p>Best regards,<br>Villa Claudia Team</p>
    """
    return _layout("Villa Claudia", content)


def configuration_check(sent_at: datetime) -> str:
    content = f"""
        <p>This is a test email from the Villa Claudia Document Upload system.</p>
        <p>If you are receiving this email, it means the email configuration is working correctly.</p>
        <p>Time sent: {sent_at.strftime("%Y-%m-%d %H:%M:%S")}</p>
    """
    return _layout("Villa Claudia - Test Email", content)

