from typing import Any, Dict
import jinja2
import os

# Configure Jinja2 environment
# src/common/utils/email_service.py -> src/templates/emails
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
TEMPLATE_DIR = os.path.join(BASE_DIR, "templates", "emails")

template_loader = jinja2.FileSystemLoader(searchpath=TEMPLATE_DIR)
template_env = jinja2.Environment(
    loader=template_loader,
    autoescape=True,
    undefined=jinja2.StrictUndefined,
)

def render_template(template_name: str, context: Dict[str, Any]) -> str:
    """
    Renders an email template with every context value HTML-escaped.

    Args:
        template_name (str): File name under src/templates/emails.
        context (Dict[str, Any]): Values interpolated into the template.

    Returns:
        str: The rendered HTML document.
    """
    template = template_env.get_template(template_name)
    return template.render(**context)
