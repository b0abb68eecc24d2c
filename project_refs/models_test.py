import pytest
from pydantic import ValidationError

from project_refs.models import (
    ReferenceInfo,
    ReferenceKind,
    ReferenceUpdate,
    UpdateAction,
)


def test_reference_info_is_immutable():
    info = ReferenceInfo(kind=ReferenceKind.PACKAGE, item_specification="PkgA")
    assert not info.treat_as_used
    with pytest.raises(ValidationError):
        info.treat_as_used = True  # type: ignore


def test_reference_info_equality_by_value():
    first = ReferenceInfo(kind=ReferenceKind.PROJECT, item_specification="../lib")
    second = ReferenceInfo(kind="project", item_specification="../lib")  # type: ignore
    assert first == second
    assert first != first.model_copy(update={"treat_as_used": True})


def test_reference_update_with_action():
    info = ReferenceInfo(kind=ReferenceKind.PACKAGE, item_specification="PkgA")
    update = ReferenceUpdate(reference_info=info, action=UpdateAction.REMOVE)
    assert update.item_specification == "PkgA"
    assert update.kind is ReferenceKind.PACKAGE
    unset = update.with_action(UpdateAction.UNSET_TREAT_AS_USED)
    assert unset.action == UpdateAction.UNSET_TREAT_AS_USED
    assert unset.reference_info == info
    assert update.action == UpdateAction.REMOVE


def test_unknown_action_is_rejected():
    info = ReferenceInfo(kind=ReferenceKind.PACKAGE, item_specification="PkgA")
    with pytest.raises(ValidationError):
        ReferenceUpdate(reference_info=info, action="rename")  # type: ignore
