"""Tests for the cover letter session service."""

import pytest

from covergen.api.services.cover_letter_service import CoverLetterService, size_kb
from covergen.lib.errors import (
    MissingInputError,
    OperationInProgressError,
    ProviderRequestError,
    UnsupportedExportFormatError,
    UnsupportedFileTypeError,
    UnsupportedProviderError,
)
from covergen.lib.models.models import ContactRecord, SessionState

from conftest import SAMPLE_JOB, SAMPLE_RESUME, openai_reply


@pytest.fixture
def ready_service(make_service, make_client):
    """Service with key, resume and job description filled in, replying via a mock OpenAI."""
    client, transport = make_client(payload=openai_reply("Dear Hiring Manager,\n\nI am writing."))
    service = make_service(client)
    service.update_fields(api_key="sk-test", job_description=SAMPLE_JOB)
    service.upload_resume("resume.txt", SAMPLE_RESUME.encode("utf-8"))
    return service, transport


def test_fresh_service_has_default_state(make_service):
    state = make_service().state
    assert state == SessionState()
    assert state.api_provider == "openai"


def test_update_fields_saves_record(make_service, store):
    service = make_service()
    service.update_fields(api_provider="gemini", job_description="JD")

    record = store.load("test-state")
    assert record["apiProvider"] == "gemini"
    assert record["jobDescription"] == "JD"
    assert record["timestamp"]
    assert set(record) == {
        "apiProvider",
        "apiKey",
        "jobDescription",
        "resumeText",
        "coverLetter",
        "contactInfo",
        "timestamp",
    }


def test_update_fields_rejects_unknown_fields(make_service):
    with pytest.raises(ValueError):
        make_service().update_fields(resume_text="sneaky")


def test_upload_resume_stores_text_and_contact(make_service, store):
    service = make_service()
    result = service.upload_resume("resume.txt", SAMPLE_RESUME.encode("utf-8"))

    assert service.state.resume_text == SAMPLE_RESUME
    assert service.state.contact_info == result.contact
    record = store.load("test-state")
    assert record["resumeText"] == SAMPLE_RESUME
    assert record["contactInfo"]["email"] == "jane.doe@example.com"


def test_failed_upload_keeps_previous_resume(make_service, store):
    service = make_service()
    service.upload_resume("resume.txt", b"First Resume\n")
    saved = store.load("test-state")

    with pytest.raises(UnsupportedFileTypeError):
        service.upload_resume("resume.xyz", b"Second Resume\n")

    assert service.state.resume_text == "First Resume\n"
    assert store.load("test-state") == saved


def test_generate_success(ready_service, store):
    service, transport = ready_service
    text = service.generate_cover_letter()

    assert text == "Dear Hiring Manager,\n\nI am writing."
    assert service.state.cover_letter == text
    assert store.load("test-state")["coverLetter"] == text

    prompt = transport.last_json()["messages"][0]["content"]
    assert "Use the current date: January 1, 2024" in prompt
    assert "Name: Jane Doe" in prompt
    assert SAMPLE_JOB in prompt
    assert transport.requests[0].headers["authorization"] == "Bearer sk-test"


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"api_key": "   "}, "Please enter your API key"),
        ({"job_description": "  \n"}, "Please enter a job description"),
    ],
)
def test_missing_inputs_block_network(ready_service, changes, message):
    service, transport = ready_service
    service.update_fields(**changes)
    with pytest.raises(MissingInputError) as exc:
        service.generate_cover_letter()
    assert exc.value.message == message
    assert transport.calls == 0


def test_missing_resume_blocks_network(make_service, make_client):
    client, transport = make_client(payload=openai_reply("unused"))
    service = make_service(client)
    service.update_fields(api_key="sk-test", job_description=SAMPLE_JOB)

    with pytest.raises(MissingInputError) as exc:
        service.generate_cover_letter()
    assert exc.value.message == "Please upload your resume"
    assert transport.calls == 0


def test_unknown_provider_blocks_network(ready_service):
    service, transport = ready_service
    service.update_fields(api_provider="cohere")
    with pytest.raises(UnsupportedProviderError):
        service.generate_cover_letter()
    assert transport.calls == 0


def test_provider_failure_keeps_saved_letter(make_service, make_client, store):
    service = make_service()
    service.update_fields(api_key="sk-test", job_description=SAMPLE_JOB, cover_letter="Old letter")
    service.upload_resume("resume.txt", SAMPLE_RESUME.encode("utf-8"))
    saved = store.load("test-state")

    client, _ = make_client(status_code=429, payload={"error": {"message": "Rate limit reached"}})
    service.client = client
    with pytest.raises(ProviderRequestError) as exc:
        service.generate_cover_letter()

    assert exc.value.message == "Rate limit reached"
    assert service.state.cover_letter == "Old letter"
    assert store.load("test-state") == saved


def test_state_survives_reload(ready_service, store):
    service, _ = ready_service
    service.generate_cover_letter()
    service.update_fields(api_provider="anthropic")

    reloaded = CoverLetterService(store, state_key="test-state")
    assert reloaded.state.api_provider == "anthropic"
    assert reloaded.state.job_description == SAMPLE_JOB
    assert reloaded.state.resume_text == SAMPLE_RESUME
    assert reloaded.state.cover_letter == service.state.cover_letter
    assert reloaded.state.contact_info == service.state.contact_info


def test_unreadable_saved_record_starts_fresh(store):
    store.save("test-state", {"apiProvider": "openai", "contactInfo": "not a record"})
    service = CoverLetterService(store, state_key="test-state")
    assert service.state == SessionState()


def test_non_json_saved_record_starts_fresh(store):
    store._con.execute(
        "INSERT INTO app_state (state_key, value_json, updated_at) VALUES (?, ?, now())",
        ["test-state", "{not json"],
    )
    service = CoverLetterService(store, state_key="test-state")
    assert service.state == SessionState()
    # The next save replaces the bad record.
    service.update_fields(job_description="JD")
    assert store.load("test-state")["jobDescription"] == "JD"


def test_saved_record_with_partial_contact(store):
    store.save("test-state", {"resumeText": "Jane", "contactInfo": {"name": "Jane"}})
    service = CoverLetterService(store, state_key="test-state")
    assert service.state.contact_info == ContactRecord(name="Jane")
    assert service.state.api_provider == "openai"


def test_same_action_cannot_run_twice(ready_service):
    service, transport = ready_service
    lock = service._action_locks["generate"]
    lock.acquire()
    try:
        with pytest.raises(OperationInProgressError):
            service.generate_cover_letter()
    finally:
        lock.release()
    assert transport.calls == 0
    # Other actions are not blocked by a running generation.
    service.update_fields(cover_letter="Edited")


def test_export_requires_letter(make_service):
    with pytest.raises(MissingInputError) as exc:
        make_service().export("pdf")
    assert exc.value.message == "Please generate a cover letter first"


def test_export_uses_edited_letter(make_service):
    service = make_service()
    service.update_fields(cover_letter="Edited letter")
    rendered = service.export("txt")
    assert rendered.content == b"Edited letter"
    assert rendered.filename == "cover-letter.txt"


def test_export_unknown_format(make_service):
    service = make_service()
    service.update_fields(cover_letter="Letter")
    with pytest.raises(UnsupportedExportFormatError):
        service.export("odt")


def test_clear(ready_service, store):
    service, _ = ready_service
    service.clear()
    assert service.state == SessionState()
    assert store.load("test-state") is None


@pytest.mark.parametrize(
    "num_bytes, expected",
    [(0, 0), (511, 0), (512, 1), (1023, 1), (1024, 1), (2560, 3), (3584, 4)],
)
def test_size_kb_rounds_halves_up(num_bytes, expected):
    assert size_kb(num_bytes) == expected
