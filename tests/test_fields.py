import pytest

from case_reference.reference.fields import (
    DEFAULT_FIELD_MAPPING,
    DERIVED_FIELDS,
    DerivedFieldSpec,
    derive_field,
    derive_fields,
)
from case_reference.reference.models import QuestionRecord


def _questions(**answers):
    return {
        int(key[1:]): QuestionRecord(id=int(key[1:]), question="Q?", answer=value)
        for key, value in answers.items()
    }


def test_default_mapping():
    mapping = {spec.field: spec.question_ids for spec in DEFAULT_FIELD_MAPPING}
    assert mapping == {
        "character_profile_text": (1, 5, 150),
        "complaint_text": (18,),
        "job_description_text": (151,),
        "actual_duties_text": (152,),
    }


def test_derive_field_joins_in_listed_order():
    questions = _questions(q1="one", q5="five", q150="summary")
    spec = DerivedFieldSpec(field="character_profile_text", question_ids=(150, 1))
    assert derive_field(questions, spec) == "summary\n\none"


def test_derive_field_custom_separator():
    questions = _questions(q1="one", q2="two")
    spec = DerivedFieldSpec(field="complaint_text", question_ids=(1, 2), separator=" | ")
    assert derive_field(questions, spec) == "one | two"


def test_derive_field_skips_missing_and_empty():
    questions = _questions(q1="", q150="summary")
    spec = DerivedFieldSpec(field="character_profile_text", question_ids=(1, 5, 150))
    assert derive_field(questions, spec) == "summary"


def test_derive_fields_fills_every_field():
    values = derive_fields(_questions(q18="complaint"))

    assert set(values) == set(DERIVED_FIELDS)
    assert values["complaint_text"] == "complaint"
    assert values["job_description_text"] == ""


def test_derive_fields_unmapped_field_is_empty():
    values = derive_fields(_questions(q18="complaint"), mapping=())
    assert values == {name: "" for name in DERIVED_FIELDS}


def test_derive_fields_rejects_unknown_field():
    with pytest.raises(ValueError):
        derive_fields({}, mapping=(DerivedFieldSpec(field="summary_text", question_ids=(1,)),))
