"""
Email template renderer using Jinja2 for the contact form emails.
Templates live in src/templates/emails and are autoescaped, so every
submitted value is HTML-escaped before it lands in markup.
"""
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.commonUtils.htmlUtil import nl2br
from src.schemas.contactSchema import ContactForm
from src.schemas.emailSchema import EmailContact, OutboundEmail

PLACEHOLDER = "N/A"

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "emails"


class EmailRenderer:
    """Renders contact form emails using Jinja2"""

    def __init__(self, sender_email: str, sender_name: str, admin_email: str,
                 template_dir: Path = TEMPLATE_DIR):
        """
        Initialize email renderer

        Args:
            sender_email: Verified Brevo sender address
            sender_name: Display name used as sender and in the signature
            admin_email: Operator address that receives submissions
            template_dir: Directory containing email template files
        """
        self.sender = EmailContact(email=sender_email, name=sender_name)
        self.admin = EmailContact(email=admin_email, name="Admin")

        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(['html', 'xml'])
        )
        self.env.filters['nl2br'] = nl2br

        # Brand configuration - change once, applies everywhere
        self.brand_config = {
            'company_name': sender_name,
            'team_name': f"{sender_name} Team",
            'response_window': "24 hours",
        }

    def render(self, template_name: str, **context) -> str:
        """
        Render an email template with context

        Args:
            template_name: Name of template file (e.g., 'admin_notification.html')
            **context: Variables to pass to template

        Returns:
            Rendered HTML string
        """
        template = self.env.get_template(template_name)

        # Merge brand config with user context
        full_context = {**self.brand_config, **context}

        return template.render(**full_context)

    def admin_notification_html(self, form: ContactForm) -> str:
        """Render the operator-facing summary of a submission"""
        return self.render(
            'admin_notification.html',
            name=form.name,
            email=form.email,
            phone=form.phone or PLACEHOLDER,
            company=form.company or PLACEHOLDER,
            requirements=form.requirements,
            budget=form.budget or PLACEHOLDER,
            timeline=form.timeline or PLACEHOLDER,
        )

    def user_confirmation_html(self, name: Optional[str]) -> str:
        """Render the acknowledgment sent back to the submitter"""
        return self.render('user_confirmation.html', name=name)

    def admin_notification_email(self, form: ContactForm) -> OutboundEmail:
        # Subject is plain text, so the name goes in unescaped
        return OutboundEmail(
            sender=self.sender,
            to=[self.admin],
            subject=f"New Form Submission - {form.name}",
            htmlContent=self.admin_notification_html(form),
        )

    def user_confirmation_email(self, form: ContactForm) -> OutboundEmail:
        return OutboundEmail(
            sender=self.sender,
            to=[EmailContact(email=form.email, name=form.name)],
            subject=f"We Received Your Requirements - {self.brand_config['company_name']}",
            htmlContent=self.user_confirmation_html(form.name),
        )
