"""
Prompt builder for categorization requests.

Renders the email's sender, subject and body together with the category
taxonomy into a single instruction block (Jinja2 template shipped in
``mail_categorizer/prompts``). The JSON keys requested from the model are
``RESPONSE_KEYS``; ResponseParser reads the same constant, so the two sides
of the contract change together.
"""

from pathlib import Path
from typing import Optional

import structlog
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from mail_categorizer.models.email import Email
from mail_categorizer.models.enums import Category
from mail_categorizer.models.results import RESPONSE_KEYS


logger = structlog.get_logger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "prompts"
DEFAULT_TEMPLATE_NAME = "categorize_prompt.txt"


class PromptBuilder:
    """
    Build categorization prompts from Email objects.

    Empty subject/body/sender render as empty strings. The category list is
    rendered verbatim, comma-joined, in taxonomy order.
    """

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        template_name: str = DEFAULT_TEMPLATE_NAME,
    ):
        """
        Initialize prompt builder.

        Args:
            templates_dir: Directory containing the prompt template
                (defaults to the packaged prompts directory)
            template_name: Template file name
        """
        self.templates_dir = Path(templates_dir or DEFAULT_TEMPLATES_DIR)

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,  # We're generating prompts, not HTML
        )

        try:
            self.template = self.jinja_env.get_template(template_name)
            logger.info(
                "Loaded prompt template",
                templates_dir=str(self.templates_dir),
                template=template_name,
            )
        except Exception as e:
            logger.error("Failed to load prompt template", error=str(e))
            raise

    def build_prompt(self, email: Email) -> str:
        """
        Render the categorization prompt for an email.

        Args:
            email: Email to categorize

        Returns:
            Rendered prompt text
        """
        rendered = self.template.render(
            categories=Category.values(),
            keys=RESPONSE_KEYS,
            sender=email.sender_display,
            subject=email.subject or "",
            body=email.body or "",
        ).strip()

        logger.debug(
            "Prompt built",
            subject_length=len(email.subject),
            body_length=len(email.body),
            prompt_length=len(rendered),
        )
        return rendered
