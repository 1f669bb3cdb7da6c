"""Integration tests for DeleteCommand against InMemoryModel."""

import pytest

from modbook.application import (
    ByModuleCode,
    CommandError,
    DeleteCommand,
    IndexRange,
    SingleIndex,
)
from modbook.application.messages import (
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_INVALID_RANGE,
    MESSAGE_NO_SUCH_MODULE_CODE,
)
from modbook.domain import (
    Index,
    ModuleCode,
    ModuleCodesContainsKeywordsPredicate,
    TagsContainsKeywordsPredicate,
)
from modbook.infrastructure import InMemoryModel
from typical_persons import (
    ALICE,
    BENSON,
    CARL,
    DANIEL,
    ELLE,
    FIONA,
    GEORGE,
    make_person,
    typical_persons,
)


def _model() -> InMemoryModel:
    return InMemoryModel(typical_persons())


def _delete_index(one_based: int) -> DeleteCommand:
    return DeleteCommand(SingleIndex(Index.from_one_based(one_based)))


def _delete_range(first: int, last: int) -> DeleteCommand:
    return DeleteCommand(IndexRange(Index.from_one_based(first), Index.from_one_based(last)))


def _delete_module(code: str) -> DeleteCommand:
    module_code = ModuleCode(code)
    return DeleteCommand(
        ByModuleCode(module_code, ModuleCodesContainsKeywordsPredicate([str(module_code)]))
    )


def _deleted(*persons) -> str:
    return f"{len(persons)} Deleted Persons: \n" + "".join(f"{p} \n" for p in persons)


def _edited(*persons) -> str:
    return f"{len(persons)} Edited Persons: \n" + "".join(f"{p} \n" for p in persons)


def _without(person, code: str):
    return person.without_module_code(ModuleCode(code))


def _assert_failure(command: DeleteCommand, model: InMemoryModel, message: str) -> None:
    persons_before = model.get_person_list()
    shown_before = model.get_filtered_person_list()
    with pytest.raises(CommandError) as excinfo:
        command.execute(model)
    assert str(excinfo.value) == message
    assert model.get_person_list() == persons_before
    assert model.get_filtered_person_list() == shown_before


# --- by index ---


def test_delete_first_index_unfiltered() -> None:
    model = _model()
    result = _delete_index(1).execute(model)
    assert result.feedback == _deleted(ALICE)
    assert model.get_person_list() == [BENSON, CARL, DANIEL, ELLE, FIONA, GEORGE]


def test_delete_last_index_unfiltered() -> None:
    model = _model()
    result = _delete_index(7).execute(model)
    assert result.feedback == _deleted(GEORGE)
    assert GEORGE not in model.get_person_list()
    assert len(model.get_person_list()) == 6


def test_delete_range_lists_persons_in_ascending_order() -> None:
    model = _model()
    result = _delete_range(2, 4).execute(model)
    assert result.feedback == _deleted(BENSON, CARL, DANIEL)
    assert model.get_person_list() == [ALICE, ELLE, FIONA, GEORGE]


def test_delete_range_single_element() -> None:
    model = _model()
    assert _delete_range(3, 3).execute(model).feedback == _deleted(CARL)


def test_delete_whole_list() -> None:
    model = _model()
    result = _delete_range(1, 7).execute(model)
    assert result.feedback.startswith("7 Deleted Persons: \n")
    assert model.get_person_list() == []


def test_delete_index_out_of_bounds_fails() -> None:
    _assert_failure(_delete_index(8), _model(), MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)


def test_delete_range_start_after_end_fails() -> None:
    _assert_failure(_delete_range(5, 3), _model(), MESSAGE_INVALID_RANGE)


def test_delete_range_end_out_of_bounds_fails() -> None:
    _assert_failure(_delete_range(6, 8), _model(), MESSAGE_INVALID_RANGE)


def test_delete_range_start_out_of_bounds_reports_index() -> None:
    _assert_failure(_delete_range(8, 9), _model(), MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)


def test_delete_from_empty_list_fails() -> None:
    _assert_failure(_delete_index(1), InMemoryModel(), MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)


def test_delete_index_filtered_list_uses_displayed_position() -> None:
    model = _model()
    model.update_filtered_person_list(TagsContainsKeywordsPredicate(["friends"]))
    assert model.get_filtered_person_list() == [ALICE, BENSON, DANIEL]

    result = _delete_index(3).execute(model)
    assert result.feedback == _deleted(DANIEL)
    assert model.get_person_list() == [ALICE, BENSON, CARL, ELLE, FIONA, GEORGE]
    # filter reset to show all
    assert model.get_filtered_person_list() == model.get_person_list()


def test_delete_range_filtered_list() -> None:
    model = _model()
    model.update_filtered_person_list(TagsContainsKeywordsPredicate(["friends"]))
    result = _delete_range(1, 2).execute(model)
    assert result.feedback == _deleted(ALICE, BENSON)
    assert model.get_person_list() == [CARL, DANIEL, ELLE, FIONA, GEORGE]


def test_delete_index_beyond_filtered_list_fails() -> None:
    model = _model()
    model.update_filtered_person_list(TagsContainsKeywordsPredicate(["friends"]))
    # index 4 exists in the address book but not in the displayed list
    _assert_failure(_delete_index(4), model, MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)


def test_delete_range_beyond_filtered_list_fails() -> None:
    model = _model()
    model.update_filtered_person_list(TagsContainsKeywordsPredicate(["friends"]))
    _assert_failure(_delete_range(2, 4), model, MESSAGE_INVALID_RANGE)


# --- by module code ---


def test_delete_module_code_deletes_single_code_persons_and_edits_others() -> None:
    model = _model()
    result = _delete_module("CS2040S").execute(model)

    new_benson = _without(BENSON, "CS2040S")
    assert result.feedback == _deleted(ALICE) + _edited(new_benson)
    assert model.get_person_list() == [new_benson, CARL, DANIEL, ELLE, FIONA, GEORGE]
    assert new_benson.module_codes == frozenset({ModuleCode("CS2106")})


def test_delete_module_code_only_edits() -> None:
    model = _model()
    result = _delete_module("CS2106").execute(model)

    edited = [_without(p, "CS2106") for p in (BENSON, DANIEL, FIONA)]
    assert result.feedback == _deleted() + _edited(*edited)
    assert model.get_person_list() == [ALICE, edited[0], CARL, edited[1], ELLE, edited[2], GEORGE]


def test_delete_module_code_lists_in_ascending_order() -> None:
    model = _model()
    result = _delete_module("CS2100").execute(model)
    assert result.feedback == _deleted(CARL) + _edited(_without(DANIEL, "CS2100"))

    model = _model()
    result = _delete_module("GEA1000").execute(model)
    assert result.feedback == _deleted(GEORGE) + _edited(_without(FIONA, "GEA1000"))
    assert model.get_person_list()[-1] == _without(FIONA, "GEA1000")


def test_delete_module_code_applies_to_whole_address_book() -> None:
    model = _model()
    model.update_filtered_person_list(TagsContainsKeywordsPredicate(["owesMoney"]))
    result = _delete_module("CS2106").execute(model)
    # FIONA and DANIEL were not displayed but still carry the code
    assert result.feedback.startswith("0 Deleted Persons: \n3 Edited Persons: \n")
    assert model.get_filtered_person_list() == model.get_person_list()


def test_delete_unknown_module_code_fails_and_resets_filter() -> None:
    model = _model()
    model.update_filtered_person_list(TagsContainsKeywordsPredicate(["friends"]))
    with pytest.raises(CommandError, match=MESSAGE_NO_SUCH_MODULE_CODE):
        _delete_module("CS1231").execute(model)
    assert model.get_person_list() == typical_persons()
    assert model.get_filtered_person_list() == typical_persons()


def test_delete_module_code_twice_fails_second_time() -> None:
    model = _model()
    _delete_module("CS2040S").execute(model)
    with pytest.raises(CommandError, match=MESSAGE_NO_SUCH_MODULE_CODE):
        _delete_module("CS2040S").execute(model)


def test_delete_module_code_example_two_persons() -> None:
    a = make_person("Amy Bee", ["CS2040S"])
    b = make_person("Bob Choo", ["CS2040S", "CS2106"])
    model = InMemoryModel([a, b])

    result = _delete_module("CS2040S").execute(model)

    new_b = _without(b, "CS2040S")
    assert result.feedback == f"1 Deleted Persons: \n{a} \n1 Edited Persons: \n{new_b} \n"
    assert model.get_person_list() == [new_b]


# --- equality ---


def test_equals() -> None:
    first = _delete_index(1)
    assert first == _delete_index(1)
    assert first != _delete_index(2)
    assert _delete_range(1, 2) == _delete_range(1, 2)
    assert _delete_range(1, 2) != _delete_range(1, 3)
    assert first != _delete_range(1, 1)
    assert _delete_module("CS2040S") == _delete_module("cs2040s")
    assert _delete_module("CS2040S") != _delete_module("CS2106")
    assert first != 1
    assert first is not None


def test_delete_module_code_edit_colliding_with_existing_person_fails_cleanly() -> None:
    both = make_person("Amy Bee", ["CS2040S", "CS2106"])
    only_second = make_person("Amy Bee", ["CS2106"])
    zed = make_person("Zed Wu", ["CS2040S"])
    model = InMemoryModel([both, only_second, zed])

    with pytest.raises(CommandError, match="would make Amy Bee identical"):
        _delete_module("CS2040S").execute(model)

    # nothing deleted or edited, and the full list is shown again
    assert model.get_person_list() == [both, only_second, zed]
    assert model.get_filtered_person_list() == [both, only_second, zed]
