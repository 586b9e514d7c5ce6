"""Prompting for values the user did not pass as flags."""

from abc import ABC, abstractmethod
from typing import List, Optional

import questionary

from ..errors import PromptError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class Prompter(ABC):
    """Resolves a value from the user, or from its default."""

    enabled = False

    @abstractmethod
    def ask(
        self,
        question: str,
        options: Optional[List[str]] = None,
        default: Optional[str] = None,
        required: bool = False,
        help: Optional[str] = None,
    ) -> Optional[str]:
        """Return the answer to a question."""
        pass


class NonInteractivePrompter(Prompter):
    """Never prompts: answers with the default."""

    enabled = False

    def ask(self, question, options=None, default=None, required=False, help=None):
        if required and not default:
            raise PromptError(f"A value is required for '{question}'")
        return default


class InteractivePrompter(Prompter):
    """Prompts in the terminal using questionary."""

    enabled = True

    def ask(self, question, options=None, default=None, required=False, help=None):
        if options:
            choices = list(options)
            if default and default not in choices:
                choices.insert(0, default)
            answer = questionary.select(
                f"{question}:",
                choices=choices,
                default=default or None,
                instruction=help,
            ).ask()
        else:
            answer = questionary.text(
                f"{question}:",
                default=default or "",
                instruction=help,
            ).ask()

        # questionary returns None when the prompt is interrupted
        if answer is None:
            raise PromptError(f"Prompt '{question}' was aborted")
        answer = answer.strip()
        if required and not answer:
            raise PromptError(f"A value is required for '{question}'")
        logger.debug(f"Answered '{question}' with '{answer}'")
        return answer


def confirm(action: str) -> bool:
    """Ask the user to confirm an action before it is performed."""
    answer = questionary.confirm(f"Are you sure you want to {action}?", default=False).ask()
    return bool(answer)
