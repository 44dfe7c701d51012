"""
Session Flags

One-shot "page just created" flag. The page builder marks a code as new in
the visitor's session; the first signup form mounted for that code in the
same session consumes the flag and opens the welcome modal.
"""

from typing import Any, MutableMapping

from .models import ResolvedPageView
from .protocols import SignupSubmitterProtocol
from .signup_form import SignupFormController


def new_page_key(code: str) -> str:
    return f"{code}-new"


class WelcomeFlagStore:
    """Read-once flags kept in a session mapping"""

    def __init__(self, session: MutableMapping[str, Any]):
        self.session = session

    def mark_new(self, code: str) -> None:
        self.session[new_page_key(code)] = "true"

    def consume_new(self, code: str) -> bool:
        """Return whether the flag was set, clearing it"""
        return bool(self.session.pop(new_page_key(code), None))


def open_signup_form(
    page: ResolvedPageView,
    submitter: SignupSubmitterProtocol,
    session: MutableMapping[str, Any],
) -> SignupFormController:
    """Mount a signup form, opening the welcome modal if the page is fresh"""
    is_fresh = WelcomeFlagStore(session).consume_new(page.code)
    return SignupFormController(page, submitter, is_fresh_page_view=is_fresh)
