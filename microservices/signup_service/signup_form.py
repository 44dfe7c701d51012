"""
Signup Form

Step definitions for the two-step signup form and the controller that
walks a visitor through them.

Step 1 collects contact info, step 2 identity info. Each step posts the
values gathered so far, plus the page code, to the signup API; the form
completes after the last step is accepted.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional

from .locale import make_locale_link
from .models import (
    CompletionView,
    FieldDescriptor,
    ResolvedPageView,
    StepDescriptor,
    SubmissionResult,
)
from .protocols import (
    FormConfigurationError,
    InvalidFormStateError,
    SignupSubmitterProtocol,
    SubmissionError,
    SubmissionInFlightError,
)

logger = logging.getLogger(__name__)

StepSubmitHandler = Callable[[Dict[str, Any]], Awaitable[SubmissionResult]]


# ====================
# Field Sets
# ====================


def contact_fields() -> List[FieldDescriptor]:
    """Fields of the contact step"""
    return [
        FieldDescriptor(
            name="email",
            input_type="email",
            label_key="signupForm.emailLabel",
            max_length=254,
        ),
        FieldDescriptor(
            name="phone",
            input_type="tel",
            required=False,
            label_key="signupForm.phoneLabel",
            pattern=r"^\+?[0-9()\-. ]{7,20}$",
            max_length=32,
        ),
    ]


def identity_fields() -> List[FieldDescriptor]:
    """Fields of the identity step"""
    return [
        FieldDescriptor(name="firstName", label_key="signupForm.firstNameLabel", max_length=100),
        FieldDescriptor(name="lastName", label_key="signupForm.lastNameLabel", max_length=100),
        FieldDescriptor(
            name="zip",
            label_key="signupForm.zipLabel",
            pattern=r"^\d{5}$",
            max_length=10,
        ),
    ]


# ====================
# Steps
# ====================


@dataclass
class StepDefinition:
    """One screen of the signup form"""
    title: str
    subtitle: str
    button_copy_key: str
    fields: List[FieldDescriptor] = field(default_factory=list)
    show_sms_disclaimer: bool = False
    on_step_submit: Optional[StepSubmitHandler] = None

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def describe(self) -> StepDescriptor:
        return StepDescriptor(
            title=self.title,
            subtitle=self.subtitle,
            button_copy_key=self.button_copy_key,
            fields=list(self.fields),
            show_sms_disclaimer=self.show_sms_disclaimer,
        )


def validate_steps(steps: List[StepDefinition]) -> None:
    """Reject empty step lists, empty field sets and duplicate field names"""
    if not steps:
        raise FormConfigurationError("A signup form needs at least one step")

    seen = set()
    for index, step in enumerate(steps):
        if not step.fields:
            raise FormConfigurationError(f"Step {index + 1} has no fields")
        for name in step.field_names:
            if name in seen:
                raise FormConfigurationError(f"Field {name!r} appears more than once")
            seen.add(name)


def build_signup_steps(
    page: ResolvedPageView,
    on_step_submit: Optional[StepSubmitHandler] = None,
) -> List[StepDefinition]:
    """Build the contact and identity steps for a page"""
    steps = [
        StepDefinition(
            title=page.title,
            subtitle=page.subtitle,
            button_copy_key="signupPage.stepOneButtonLabel",
            fields=contact_fields(),
            show_sms_disclaimer=True,
            on_step_submit=on_step_submit,
        ),
        StepDefinition(
            title=page.title,
            subtitle=page.subtitle,
            button_copy_key="signupPage.stepTwoButtonLabel",
            fields=identity_fields(),
            on_step_submit=on_step_submit,
        ),
    ]
    validate_steps(steps)
    return steps


# ====================
# Controller
# ====================


class FormState(str, Enum):
    """Signup form lifecycle"""
    STEP_1_ACTIVE = "step_1_active"
    STEP_2_ACTIVE = "step_2_active"
    COMPLETED = "completed"


class SignupFormController:
    """
    Drives one signup form instance.

    STEP_1_ACTIVE -> STEP_2_ACTIVE -> COMPLETED, advancing only when the
    current step's submission succeeds. COMPLETED is terminal for the
    lifetime of the instance.

    At most one submission is outstanding at a time. Once unmounted, results
    of submissions still in flight are dropped without touching state.
    """

    STEP_STATES = [FormState.STEP_1_ACTIVE, FormState.STEP_2_ACTIVE]

    VALID_TRANSITIONS = {
        FormState.STEP_1_ACTIVE: [FormState.STEP_2_ACTIVE],
        FormState.STEP_2_ACTIVE: [FormState.COMPLETED],
        FormState.COMPLETED: [],  # Terminal state
    }

    def __init__(
        self,
        page: ResolvedPageView,
        submitter: SignupSubmitterProtocol,
        is_fresh_page_view: bool = False,
    ):
        self.page = page
        self.submitter = submitter
        self.steps = build_signup_steps(page, self._submit_values)

        self.current_step_index = 0
        self.form_values: Dict[str, Any] = {}
        self.has_reached_end = False
        self.is_modal_open = is_fresh_page_view
        self.last_error: Optional[str] = None

        self._in_flight = False
        self._mounted = True

    @property
    def state(self) -> FormState:
        if self.has_reached_end:
            return FormState.COMPLETED
        return self.STEP_STATES[self.current_step_index]

    @property
    def current_step(self) -> Optional[StepDefinition]:
        if self.has_reached_end:
            return None
        return self.steps[self.current_step_index]

    @property
    def is_submitting(self) -> bool:
        return self._in_flight

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def share_text(self) -> str:
        """Text shared from the welcome modal and the completion screen"""
        return self.page.share_text

    async def _submit_values(self, values: Dict[str, Any]) -> SubmissionResult:
        return await self.submitter.submit_signup(values, code=self.page.code)

    async def submit_step(self, values: Dict[str, Any]) -> SubmissionResult:
        """
        Submit the current step.

        Args:
            values: Values entered on the current step

        Returns:
            The submission result; on failure the form stays on the current
            step and ``last_error`` describes the failure.

        Raises:
            SubmissionInFlightError: a submission for this form is outstanding
            InvalidFormStateError: the form is completed or unmounted
        """
        if not self._mounted:
            raise InvalidFormStateError("Signup form is unmounted", self.state)
        if self.has_reached_end:
            raise InvalidFormStateError("Signup form is already completed", self.state)
        if self._in_flight:
            raise SubmissionInFlightError("A submission is already in progress", self.state)

        step = self.current_step
        merged = {**self.form_values, **values}

        self._in_flight = True
        try:
            result = await step.on_step_submit(merged)
        except SubmissionError as e:
            result = SubmissionResult(success=False, status_code=e.status_code, message=str(e))
        finally:
            self._in_flight = False

        if not self._mounted:
            logger.debug(f"Dropping submission result for unmounted form {self.page.code!r}")
            return result

        if not result.success:
            self.last_error = result.message or "Signup submission failed"
            logger.info(f"Step {self.current_step_index + 1} of {self.page.code!r} rejected: {self.last_error}")
            return result

        self.last_error = None
        self.form_values = merged
        self._advance()
        return result

    def _advance(self) -> None:
        next_index = self.current_step_index + 1
        if next_index < len(self.steps):
            target = self.STEP_STATES[next_index]
        else:
            target = FormState.COMPLETED

        if target not in self.VALID_TRANSITIONS[self.state]:
            raise InvalidFormStateError(
                f"Cannot move from {self.state.value} to {target.value}", self.state
            )

        if target == FormState.COMPLETED:
            self.has_reached_end = True
        else:
            self.current_step_index = next_index

    def close_modal(self) -> None:
        self.is_modal_open = False

    def unmount(self) -> None:
        """Detach the controller; late submission results are ignored"""
        self._mounted = False

    def completion_view(self, current_path: str = "/") -> CompletionView:
        """Share and call-to-action data shown once the form is completed"""
        if not self.has_reached_end:
            raise InvalidFormStateError("Signup form is not completed", self.state)

        return CompletionView(
            created_by_first_name=self.page.created_by_first_name,
            share_text=self.share_text,
            create_link=make_locale_link("/", current_path),
        )
