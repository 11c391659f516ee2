"""
Email template renderer using Jinja2 for easy maintenance
"""
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape


class EmailRenderer:
    """Renders email templates using Jinja2"""

    def __init__(self, template_dir: Optional[str] = None):
        """
        Initialize email renderer

        Args:
            template_dir: Directory containing email template files. Defaults to
                the templates/emails folder shipped inside the src package.
        """
        if template_dir is None:
            # Anchor to the 'src' directory that holds this module
            project_root = Path(__file__).resolve().parent
            while project_root.name != 'src' and project_root.parent != project_root:
                project_root = project_root.parent
            self.template_dir = project_root / "templates" / "emails"
        else:
            self.template_dir = Path(template_dir)

        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(['html', 'xml'])
        )

    def render(self, template_name: str, **context) -> str:
        """
        Render an email template with context

        Args:
            template_name: Name of template file (e.g., 'contact_notification.html')
            **context: Variables to pass to template

        Returns:
            Rendered HTML string
        """
        template = self.env.get_template(template_name)
        return template.render(**context)

    def contact_notification_email(self, name: str, email: str, phone: str,
                                   topic: str, message: str, agreed_to_policy: bool) -> str:
        """Render the internal notification for a new contact form submission"""
        return self.render(
            'contact_notification.html',
            name=name,
            email=email,
            phone=phone,
            topic=topic,
            message=message,
            agreed_to_policy="Yes" if agreed_to_policy else "No",
        )


# Singleton instance
_renderer = None


def get_email_renderer() -> EmailRenderer:
    """Get or create email renderer instance"""
    global _renderer
    if _renderer is None:
        _renderer = EmailRenderer()
    return _renderer
