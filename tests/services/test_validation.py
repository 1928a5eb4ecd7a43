from datetime import date, timedelta

from rookies.domain.enums import Gender
from rookies.services.schemas.people import PersonForm
from rookies.services.validation import ModelState, bind_model


def _form(**overrides):
    data = {
        "first_name": "Nhien",
        "last_name": "Hao",
        "gender": "Male",
        "date_of_birth": "1995-01-16",
        "birth_place": "Bac Ninh",
        "phone_number": "0946616194",
    }
    data.update(overrides)
    return data


def test_model_state_collects_errors_verbatim():
    state = ModelState()
    assert state.is_valid and len(state) == 0

    state.add_model_error("error", "some error")
    state.add_model_error("error", "another")
    state.add_model_error("first_name", "required")

    assert not state.is_valid
    assert "error" in state
    assert state.to_errors() == {"error": ["some error", "another"], "first_name": ["required"]}


def test_to_errors_returns_a_copy():
    state = ModelState()
    state.add_model_error("k", "m")
    errors = state.to_errors()
    errors["k"].append("mutated")
    errors["other"] = ["x"]
    assert state.to_errors() == {"k": ["m"]}


def test_bind_model_valid_form():
    state = ModelState()
    model = bind_model(PersonForm, _form(is_graduated="on"), state)

    assert state.is_valid
    assert isinstance(model, PersonForm)
    assert model.id is None
    assert model.gender is Gender.male
    assert model.date_of_birth == date(1995, 1, 16)
    assert model.is_graduated is True


def test_bind_model_treats_blank_strings_as_missing():
    state = ModelState()
    model = bind_model(PersonForm, _form(id="", birth_place="   "), state)
    assert state.is_valid
    assert model.id is None
    assert model.birth_place == ""


def test_bind_model_records_one_key_per_failing_field():
    state = ModelState()
    model = bind_model(PersonForm, _form(first_name="", phone_number="call me"), state)

    assert model is None
    errors = state.to_errors()
    assert set(errors) == {"first_name", "phone_number"}
    assert all(isinstance(m, str) and m for msgs in errors.values() for m in msgs)


def test_bind_model_rejects_future_birthday():
    state = ModelState()
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    assert bind_model(PersonForm, _form(date_of_birth=tomorrow), state) is None
    assert "date_of_birth" in state
