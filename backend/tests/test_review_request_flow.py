"""Tests for the client-side review request flow."""
import httpx
import pytest

from shipwrecked.constants import ReviewType
from shipwrecked.services.review_request import ReviewFlowState, ReviewRequestFlow
from shipwrecked.utils.exceptions import ValidationError

COMPLETE = {
    "code_url": "https://github.com/sailor/raft",
    "playable_url": "https://raft.example",
    "screenshot": "https://cdn.example/raft.png",
}


def recording_http(status_code=200, payload=None):
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(status_code, json=payload or {})

    http = httpx.Client(transport=httpx.MockTransport(handler), base_url="http://testserver")
    return http, requests


def make_flow(http=None, **kwargs):
    if http is None:
        http, _ = recording_http()
    kwargs.setdefault("is_in_review", False)
    return ReviewRequestFlow(http, "project-1", **kwargs)


class TestState:

    @pytest.mark.parametrize("in_review", [False, True])
    def test_missing_code_url_shows_warning(self, in_review):
        flow = make_flow(is_in_review=in_review, **dict(COMPLETE, code_url=""))

        assert flow.state == ReviewFlowState.METADATA_WARNING

    def test_whitespace_counts_as_missing(self):
        flow = make_flow(**dict(COMPLETE, screenshot="   "))

        assert flow.state == ReviewFlowState.METADATA_WARNING

    def test_complete_metadata_shows_form(self):
        assert make_flow(**COMPLETE).state == ReviewFlowState.REQUEST_FORM

    def test_in_review_hides_flow(self):
        assert make_flow(is_in_review=True, **COMPLETE).state == ReviewFlowState.HIDDEN

    def test_review_mode_hides_flow(self):
        flow = make_flow(review_mode=True, **dict(COMPLETE, code_url=""))

        assert flow.state == ReviewFlowState.HIDDEN


class TestReviewType:

    def test_default_for_new_project(self):
        flow = make_flow(**COMPLETE)

        assert flow.review_type == ReviewType.SHIPPED_APPROVAL
        assert flow.options == [ReviewType.SHIPPED_APPROVAL, ReviewType.VIRAL_APPROVAL, ReviewType.OTHER]

    def test_default_for_shipped_project(self):
        flow = make_flow(is_shipped=True, is_viral=True, **COMPLETE)

        assert flow.review_type == ReviewType.HOURS_APPROVAL
        assert flow.options == [ReviewType.HOURS_APPROVAL, ReviewType.OTHER]

    def test_viral_offered_only_when_not_viral(self):
        flow = make_flow(is_shipped=True, **COMPLETE)

        flow.select_review_type(ReviewType.VIRAL_APPROVAL)

        assert flow.review_type == ReviewType.VIRAL_APPROVAL
        with pytest.raises(ValidationError):
            make_flow(is_viral=True, **COMPLETE).select_review_type(ReviewType.VIRAL_APPROVAL)

    def test_shipping_resets_default(self):
        flow = make_flow(**COMPLETE)
        flow.select_review_type(ReviewType.OTHER)

        flow.set_shipped(True)

        assert flow.review_type == ReviewType.HOURS_APPROVAL

    def test_placeholder_follows_type(self):
        flow = make_flow(**COMPLETE)
        shipped_text = flow.placeholder_text

        flow.select_review_type(ReviewType.OTHER)

        assert flow.placeholder_text != shipped_text
        assert "Specify what you need reviewed" in flow.placeholder_text


class TestSubmit:

    def test_blank_comment_is_not_sent(self):
        http, requests = recording_http()
        flow = make_flow(http, **COMPLETE)
        flow.comment = "   "

        assert flow.can_submit is False
        assert flow.submit() is False
        assert flow.error == "Please specify what you need reviewed"
        assert requests == []

    def test_failure_keeps_comment(self):
        http, requests = recording_http(status_code=500, payload={"detail": "boom"})
        flow = make_flow(http, **COMPLETE)
        flow.comment = "Ship it"

        assert flow.submit() is False
        assert flow.comment == "Ship it"
        assert flow.error == "Failed to submit project for review"
        assert flow.state == ReviewFlowState.REQUEST_FORM
        assert flow.is_submitting is False
        assert len(requests) == 1

    def test_success_against_api(self, client, user_headers):
        project = client.post(
            "/api/projects",
            json={
                "name": "Raft",
                "codeUrl": COMPLETE["code_url"],
                "playableUrl": COMPLETE["playable_url"],
                "screenshot": COMPLETE["screenshot"],
            },
            headers=user_headers,
        ).json()
        client.headers.update(user_headers)
        received = []
        flow = ReviewRequestFlow(
            client,
            project["projectID"],
            is_in_review=False,
            on_submitted=lambda p, r: received.append((p, r)),
            **COMPLETE,
        )
        flow.comment = "  Deployed and playable  "

        assert flow.submit() is True

        assert flow.comment == ""
        assert flow.error is None
        assert flow.state == ReviewFlowState.SUBMITTED
        updated, review = received[0]
        assert updated["in_review"] is True
        assert review["comment"] == "Deployed and playable"
        assert review["reviewType"] == ReviewType.SHIPPED_APPROVAL
