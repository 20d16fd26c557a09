"""
Edit/create form state machine.

    viewing --start_editing--> editing --submit (valid)--> submitting
    submitting --success--> viewing
    submitting --failure--> editing (values kept, error notified)

Create forms start in `editing`. An invalid submit stays in `editing` with
per-field messages and never reaches the mutation.
"""
import enum
import logging
from typing import Any, Callable, Dict, Generic, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from scm_dashboard.services.mutations import MutationResult, MutationWorkflow
from scm_dashboard.services.validation import ValidationResult, validate

logger = logging.getLogger(__name__)

SchemaType = TypeVar("SchemaType", bound=BaseModel)


class FormState(str, enum.Enum):
    VIEWING = "viewing"
    EDITING = "editing"
    SUBMITTING = "submitting"


class InvalidTransition(Exception):
    pass


class FormController(Generic[SchemaType]):
    def __init__(
        self,
        schema: Type[SchemaType],
        workflow: MutationWorkflow,
        *,
        initial: Optional[Mapping[str, Any]] = None,
        create: bool = False,
        on_success: Optional[Callable[[Any], None]] = None,
    ):
        self.schema = schema
        self.workflow = workflow
        self.create = create
        self.on_success = on_success
        self.initial: Dict[str, Any] = dict(initial or {})
        self.values: Dict[str, Any] = dict(self.initial)
        self.errors: Dict[str, str] = {}
        self.state = FormState.EDITING if create else FormState.VIEWING
        self.mounted = True
        self.last_result: Optional[MutationResult] = None

    # ------------------------------------------
    # transitions driven by the user
    # ------------------------------------------

    def start_editing(self, record: Optional[Mapping[str, Any]] = None):
        if self.state is not FormState.VIEWING:
            raise InvalidTransition(f"Cannot start editing from {self.state.value}")
        if record is not None:
            self.initial = dict(record)
        self.values = dict(self.initial)
        self.errors = {}
        self.state = FormState.EDITING

    def cancel(self):
        if self.state is not FormState.EDITING:
            raise InvalidTransition(f"Cannot cancel from {self.state.value}")
        self.values = dict(self.initial)
        self.errors = {}
        if not self.create:
            self.state = FormState.VIEWING

    def set_value(self, name: str, value: Any):
        if self.state is not FormState.EDITING:
            raise InvalidTransition(f"Fields are locked while {self.state.value}")
        self.values[name] = value
        self.errors.pop(name, None)

    def update(self, **values: Any):
        for name, value in values.items():
            self.set_value(name, value)

    @property
    def can_submit(self) -> bool:
        return self.state is FormState.EDITING

    @property
    def is_submitting(self) -> bool:
        return self.state is FormState.SUBMITTING

    def validate(self) -> ValidationResult[SchemaType]:
        result = validate(self.schema, self.values)
        self.errors = dict(result.errors)
        return result

    async def submit(self) -> bool:
        """Validate and run the mutation; returns True when it succeeded"""
        if self.state is not FormState.EDITING:
            # the submit control is disabled outside editing
            logger.warning(f"Ignoring submit while {self.state.value}")
            return False

        result = self.validate()
        if not result.is_valid:
            logger.info(f"Form has {len(result.errors)} invalid field(s): {sorted(result.errors)}")
            return False

        self.state = FormState.SUBMITTING
        outcome = await self.workflow.execute(result.data, is_active=lambda: self.mounted)
        self.last_result = outcome

        if not self.mounted:
            return outcome.success

        if outcome.success:
            self.state = FormState.VIEWING
            if self.on_success is not None:
                self.on_success(outcome.data)
        else:
            self.state = FormState.EDITING
        return outcome.success

    def unmount(self):
        self.mounted = False
