"""Integration tests for public and administrator review endpoints."""

from __future__ import annotations

import uuid

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.administration.gate import get_admin_gate
from apps.reviews.models import Review

ADMIN_TOKEN = "test-admin-secret"


class ReviewAPITests(APITestCase):
    def setUp(self) -> None:
        get_admin_gate.cache_clear()
        self.list_url = reverse("review-list")

    def _payload(self, **overrides) -> dict:
        payload = {
            "name": "Bo",
            "project_type": "Web Development",
            "rating": 3,
            "review": "Great work",
            "is_anonymous": False,
        }
        payload.update(overrides)
        return payload

    def test_submit_review_starts_pending(self) -> None:
        response = self.client.post(self.list_url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["status"], "pending")
        review = Review.objects.get(pk=response.data["id"])
        self.assertEqual(review.body, "Great work")

    def test_out_of_range_ratings_are_rejected(self) -> None:
        for rating in (0, 6):
            response = self.client.post(self.list_url, self._payload(rating=rating), format="json")
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
            self.assertIn("rating", response.data)
        self.assertFalse(Review.objects.exists())

    def test_boundary_ratings_are_accepted(self) -> None:
        for rating in (1, 5):
            response = self.client.post(self.list_url, self._payload(rating=rating), format="json")
            self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)

    def test_name_required_unless_anonymous(self) -> None:
        response = self.client.post(self.list_url, self._payload(name=""), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("name", response.data)

        response = self.client.post(self.list_url, self._payload(name="", is_anonymous=True), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)

    def test_unknown_project_type_is_rejected(self) -> None:
        response = self.client.post(self.list_url, self._payload(project_type="Plumbing"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)

    def test_public_list_shows_approved_only(self) -> None:
        Review.objects.create(name="Bo", project_type="Other", rating=4, body="Pending one")
        approved = Review.objects.create(
            name="Cy", project_type="Other", rating=5, body="Approved one", status=Review.Status.APPROVED
        )

        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([row["id"] for row in response.data], [str(approved.id)])
        self.assertEqual(response.data[0]["review"], "Approved one")
        self.assertNotIn("status", response.data[0])

    def test_public_list_respects_limit(self) -> None:
        for i in range(3):
            Review.objects.create(
                name=f"R{i}", project_type="Other", rating=5, body="Nice", status=Review.Status.APPROVED
            )

        response = self.client.get(self.list_url, {"limit": 2})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(len(response.data), 2)


class AdminReviewAPITests(APITestCase):
    def setUp(self) -> None:
        get_admin_gate.cache_clear()
        self.review = Review.objects.create(name="Bo", project_type="Other", rating=3, body="Great work")
        self.list_url = reverse("admin-review-list")
        self.approve_url = reverse("admin-review-approve", args=[self.review.id])
        self.detail_url = reverse("admin-review-detail", args=[self.review.id])

    def _authorize(self) -> None:
        self.client.credentials(HTTP_X_ADMIN_TOKEN=ADMIN_TOKEN)

    def test_approve_makes_review_public(self) -> None:
        self._authorize()

        response = self.client.patch(self.approve_url, {"approved": True}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], "approved")
        self.assertTrue(response.data["approved"])
        public = self.client.get(reverse("review-list"))
        self.assertEqual([row["id"] for row in public.data], [str(self.review.id)])

    def test_repeated_approval_is_not_an_error(self) -> None:
        self._authorize()

        for _ in range(2):
            response = self.client.patch(self.approve_url, {"approved": True}, format="json")
            self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

    def test_approval_of_missing_review_is_not_found(self) -> None:
        self._authorize()

        response = self.client.patch(
            reverse("admin-review-approve", args=[uuid.uuid4()]), {"approved": True}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)

    def test_delete_review(self) -> None:
        self._authorize()

        response = self.client.delete(self.detail_url)

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Review.objects.exists())

    def test_delete_missing_review_is_not_found(self) -> None:
        self._authorize()

        response = self.client.delete(reverse("admin-review-detail", args=[uuid.uuid4()]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
        self.assertEqual(response.data["code"], "not_found")

    def test_admin_list_includes_pending_and_filters_by_status(self) -> None:
        Review.objects.create(name="Cy", project_type="Other", rating=5, body="Ok", status=Review.Status.APPROVED)
        self._authorize()

        everything = self.client.get(self.list_url)
        pending = self.client.get(self.list_url, {"status": "pending"})

        self.assertEqual(everything.status_code, status.HTTP_200_OK, everything.data)
        self.assertEqual(len(everything.data), 2)
        self.assertEqual([row["id"] for row in pending.data], [str(self.review.id)])
        self.assertEqual(pending.data[0]["status"], "pending")

    def test_privileged_calls_without_token_change_nothing(self) -> None:
        approve = self.client.patch(self.approve_url, {"approved": True}, format="json")
        delete = self.client.delete(self.detail_url)
        listing = self.client.get(self.list_url)

        for response in (approve, delete, listing):
            self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.review.refresh_from_db()
        self.assertEqual(self.review.status, Review.Status.PENDING)

    def test_privileged_calls_with_wrong_token_change_nothing(self) -> None:
        self.client.credentials(HTTP_X_ADMIN_TOKEN="guess")

        response = self.client.delete(self.detail_url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertTrue(Review.objects.filter(pk=self.review.id).exists())
