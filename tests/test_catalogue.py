"""Tests for reviews, amenities and coupons."""

import io

from hotel_booking.models import Review

from tests.conftest import API


class TestReviews:
    """Tests for /reviews."""

    def _review(self, db_session, hotel, user, rating: int = 4) -> Review:
        review = Review(rating=rating, description="Lovely stay", hotel_id=hotel.id, guest_id=user.id)
        db_session.add(review)
        db_session.commit()
        return review

    def test_create_with_image(self, client, hotel, user) -> None:
        """Should store the attached image and keep its URL."""
        form = {"rating": "5", "description": "Great view", "hotelId": str(hotel.id), "guestId": str(user.id)}
        files = {"file": ("view.jpg", io.BytesIO(b"jpeg"), "image/jpeg")}

        response = client.post(f"{API}/reviews", data=form, files=files)

        assert response.status_code == 201
        assert response.json()["file"].startswith("/uploads/reviews/")

    def test_create_without_image(self, client, hotel, user) -> None:
        """Should accept a review with no attachment."""
        form = {"rating": "3", "description": "Fine", "hotelId": str(hotel.id), "guestId": str(user.id)}

        response = client.post(f"{API}/reviews", data=form)

        assert response.status_code == 201
        assert response.json()["file"] is None

    def test_rating_out_of_range(self, client, hotel, user) -> None:
        """Should reject ratings outside 1-5."""
        form = {"rating": "6", "description": "Too good", "hotelId": str(hotel.id), "guestId": str(user.id)}

        assert client.post(f"{API}/reviews", data=form).status_code == 400

    def test_flattened_hotel_reviews(self, client, db_session, hotel, user) -> None:
        """Should include hotel and guest names in each record."""
        review = self._review(db_session, hotel, user)

        [record] = client.get(f"{API}/reviews", params={"hotelId": hotel.id}).json()

        assert record["id"] == review.id
        assert record["hotelName"] == "Riverside Hotel"
        assert record["guestName"] == "Alice Nguyen"
        assert "guestAvatar" in record

    def test_no_reviews_for_hotel(self, client, hotel) -> None:
        """Should answer 404 when the hotel has no reviews."""
        response = client.get(f"{API}/reviews", params={"hotelId": hotel.id})

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "No reviews found for this hotel"

    def test_update_and_delete(self, client, db_session, hotel, user) -> None:
        """Should change the rating, list it, then delete it."""
        review = self._review(db_session, hotel, user)

        updated = client.put(f"{API}/reviews/{review.id}", json={"rating": 2})
        everything = client.get(f"{API}/reviews/all").json()
        deleted = client.delete(f"{API}/reviews/{review.id}")

        assert updated.json()["rating"] == 2
        assert [r["id"] for r in everything] == [review.id]
        assert deleted.status_code == 200
        assert client.get(f"{API}/reviews/{review.id}").status_code == 404


class TestAmenities:
    """Tests for /amenities."""

    def test_crud(self, client) -> None:
        """Should create, filter, update and delete an amenity."""
        created = client.post(f"{API}/amenities", json={"name": "Breakfast", "Aclass": "food"})
        amenity_id = created.json()["id"]

        by_class = client.get(f"{API}/amenities", params={"Aclass": "food"}).json()
        renamed = client.put(f"{API}/amenities/{amenity_id}", json={"name": "Buffet breakfast"})
        deleted = client.delete(f"{API}/amenities/{amenity_id}")

        assert created.status_code == 201
        assert created.json()["Aclass"] == "food"
        assert [a["id"] for a in by_class] == [amenity_id]
        assert renamed.json()["name"] == "Buffet breakfast"
        assert deleted.status_code == 200
        assert client.get(f"{API}/amenities/{amenity_id}").status_code == 404

    def test_name_too_short(self, client) -> None:
        """Should require at least three characters."""
        assert client.post(f"{API}/amenities", json={"name": "TV", "Aclass": "media"}).status_code == 400


class TestCoupons:
    """Tests for /coupons."""

    COUPON = {"code": "SUMMER24", "percent": 15, "begin": "2024-06-01", "end": "2024-08-31"}

    def test_create_and_lookup_by_code(self, client) -> None:
        """Should create a coupon and find it by its code."""
        created = client.post(f"{API}/coupons", json=self.COUPON)

        found = client.get(f"{API}/coupons/code/SUMMER24")

        assert created.status_code == 201
        assert found.json()["id"] == created.json()["id"]

    def test_unknown_code(self, client) -> None:
        """Should answer 404 for an unknown code."""
        assert client.get(f"{API}/coupons/code/NOPE").status_code == 404

    def test_duplicate_code(self, client) -> None:
        """Should answer 400 when the code already exists."""
        client.post(f"{API}/coupons", json=self.COUPON)

        response = client.post(f"{API}/coupons", json=self.COUPON)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "DUPLICATE_ENTRY"

    def test_period_must_be_ordered(self, client) -> None:
        """Should reject a coupon whose begin is not before its end."""
        response = client.post(f"{API}/coupons", json=dict(self.COUPON, begin="2024-09-01"))

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "'begin' date must be before 'end' date."

    def test_update_checks_stored_period(self, client) -> None:
        """Should compare a new begin date against the stored end date."""
        coupon_id = client.post(f"{API}/coupons", json=self.COUPON).json()["id"]

        response = client.put(f"{API}/coupons/{coupon_id}", json={"begin": "2024-09-15"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_DATE_RANGE"

    def test_update_and_delete(self, client) -> None:
        """Should change the discount and then delete the coupon."""
        coupon_id = client.post(f"{API}/coupons", json=self.COUPON).json()["id"]

        updated = client.put(f"{API}/coupons/{coupon_id}", json={"percent": 20})
        deleted = client.delete(f"{API}/coupons/{coupon_id}")

        assert updated.json()["percent"] == 20
        assert deleted.json() == {"message": "Coupon deleted successfully"}
        assert client.get(f"{API}/coupons").json() == []
