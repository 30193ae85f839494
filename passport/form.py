"""Passport form: a request bound to the values submitted for it."""

from pydantic import BaseModel, ConfigDict, Field

from passport.lang.localizer import Localizer
from passport.observability.logging import get_logger
from passport.schemes.registry import SchemeRegistry
from passport.scopes.builder import compute_scopes
from passport.scopes.models import Scope, ScopeRow
from passport.scopes.presenter import compute_scope_row
from passport.scopes.resolver import fields_type_for_scope_type, scope_type_for_value_type
from passport.values.enums import ValueType
from passport.values.store import ValueStore

logger = get_logger(__name__)


class FormRequest(BaseModel):
    """What a service asks the user to provide."""

    model_config = ConfigDict(frozen=True)

    required_types: list[ValueType] = Field(
        ..., min_length=1, description="Requested value types in request order"
    )
    identity_selfie_required: bool = Field(
        default=False, description="Identity documents need a selfie"
    )


class PassportForm:
    """Computes scopes and checklist rows of a request from current values.

    Nothing is cached: every call reads the store again, so edits made
    to the values between calls are always reflected.

    Usage:
        form = PassportForm(request, InMemoryValueStore(values))
        for row in form.compute_rows():
            ...
    """

    def __init__(
        self,
        request: FormRequest,
        store: ValueStore,
        schemes: SchemeRegistry | None = None,
        lang: Localizer | None = None,
    ) -> None:
        self._request = request
        self._store = store
        self._schemes = schemes
        self._lang = lang

    @property
    def request(self) -> FormRequest:
        return self._request

    def missing_types(self) -> list[ValueType]:
        """List value types the scopes need but the store lacks.

        Covers the requested types and the primary fields type of every
        scope they resolve to, in first-needed order.
        """
        needed: list[ValueType] = []
        for value_type in self._request.required_types:
            fields_type = fields_type_for_scope_type(scope_type_for_value_type(value_type))
            for candidate in (fields_type, value_type):
                if candidate not in needed:
                    needed.append(candidate)
        return [value_type for value_type in needed if self._store.get(value_type) is None]

    def compute_scopes(self) -> list[Scope]:
        return compute_scopes(
            self._request.required_types,
            self._store,
            identity_selfie_required=self._request.identity_selfie_required,
        )

    def compute_rows(self) -> list[ScopeRow]:
        """Build the checklist rows of all scopes of the request."""
        rows = [
            compute_scope_row(scope, schemes=self._schemes, lang=self._lang)
            for scope in self.compute_scopes()
        ]
        logger.debug(
            "scope_rows_computed",
            row_count=len(rows),
            ready_count=sum(1 for row in rows if row.ready),
        )
        return rows
