"""
Unit Tests for signup service models
"""

import os
import sys

import pytest
from bson import ObjectId
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from microservices.signup_service.models import (
    Campaign,
    Page,
    PageMeta,
    PageResolution,
    ResolutionStatus,
    ResolvedPageView,
    SignupRequest,
    User,
)

pytestmark = [pytest.mark.unit]


def make_view(**overrides) -> ResolvedPageView:
    data = {
        "code": "ed",
        "title": "Help Ed",
        "subtitle": "Join now",
        "background": "bg1",
        "created_by_first_name": "Ed",
    }
    data.update(overrides)
    return ResolvedPageView(**data)


class TestDocumentModels:

    def test_object_ids_become_strings(self):
        campaign_id, user_id = ObjectId(), ObjectId()

        page = Page.from_document({
            "_id": ObjectId(),
            "code": "ed",
            "campaign": campaign_id,
            "title": "Help Ed",
            "createdBy": user_id,
        })

        assert page.campaign == str(campaign_id)
        assert page.created_by == str(user_id)
        assert isinstance(page.id, str)

    def test_from_none_is_none(self):
        assert Campaign.from_document(None) is None

    def test_user_reads_camel_case_document(self):
        user = User.from_document({
            "_id": ObjectId(),
            "email": "ed@edmarkey.com",
            "password": "hash",
            "firstName": "Ed",
            "emailFrequency": "WEEKLY_EMAIL",
            "createdAt": 1,
            "lastUpdatedAt": 2,
            "lastAuthenticationUpdate": "1",
        })

        assert user.first_name == "Ed"
        assert user.password_hash == "hash"
        assert user.email_frequency == "WEEKLY_EMAIL"

    def test_user_needs_only_id_and_first_name(self):
        user = User.from_document({"_id": ObjectId(), "firstName": "Ed"})

        assert user.first_name == "Ed"
        assert user.email is None

    def test_user_accepts_unknown_email_frequency(self):
        user = User.from_document({
            "_id": ObjectId(),
            "firstName": "Ed",
            "emailFrequency": "BIWEEKLY_EMAIL",
        })

        assert user.email_frequency == "BIWEEKLY_EMAIL"

    @pytest.mark.parametrize("document", [
        {"_id": "p1", "code": "ed", "campaign": "c", "title": "t"},
        {"_id": "p1", "code": "ed", "campaign": "c", "title": "t", "createdBy": None},
    ])
    def test_page_without_creator_loads(self, document):
        assert Page.from_document(document).created_by is None


class TestResolvedPageView:

    def test_share_text(self):
        assert make_view().share_text == "Help Ed Join now"

    def test_is_frozen(self):
        view = make_view()

        with pytest.raises(ValidationError):
            view.title = "Changed"

    def test_serializes_creator_name_camel_case(self):
        assert make_view().model_dump(by_alias=True)["createdByFirstName"] == "Ed"

    def test_meta_uses_title_and_subtitle(self):
        meta = PageMeta.for_view(make_view())

        assert meta.og_title == "Help Ed"
        assert meta.og_description == "Join now"
        assert meta.twitter_card == "summary_large_image"


class TestPageResolution:

    def test_found_carries_view_code(self):
        resolution = PageResolution.found(make_view())

        assert resolution.status == ResolutionStatus.FOUND
        assert resolution.code == "ed"
        assert resolution.is_found

    def test_not_found_has_no_view(self):
        resolution = PageResolution.not_found("ed")

        assert resolution.view is None
        assert not resolution.is_found

    def test_failed_carries_error(self):
        error = RuntimeError("boom")

        resolution = PageResolution.failed("ed", error)

        assert resolution.status == ResolutionStatus.ERROR
        assert resolution.error is error


class TestSignupRequest:

    def test_submitted_values_use_document_keys(self):
        request = SignupRequest.model_validate({
            "code": "ed",
            "email": "Jo@Example.com",
            "firstName": "Jo",
            "zip": "02108",
        })

        assert request.submitted_values() == {
            "email": "jo@example.com",
            "firstName": "Jo",
            "zip": "02108",
        }

    def test_unknown_fields_ignored(self):
        request = SignupRequest.model_validate(
            {"code": "ed", "email": "jo@example.com", "favoriteColor": "blue"}
        )

        assert "favoriteColor" not in request.submitted_values()

    def test_email_required(self):
        with pytest.raises(ValidationError):
            SignupRequest.model_validate({"code": "ed"})

    def test_code_required(self):
        with pytest.raises(ValidationError):
            SignupRequest.model_validate({"code": "", "email": "jo@example.com"})
