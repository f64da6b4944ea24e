"""
API tests for rating endpoints.
"""


class TestRatingEndpoints:
    """Tests for GET /ratings/{movie_id} and GET /ratings/{movie_id}/average."""

    def test_get_ratings(self, client):
        r = client.get("/ratings/1")
        assert r.status_code == 200
        data = r.json()
        assert len(data) == 3
        assert data[0] == {
            "ratingId": 1,
            "userId": 10,
            "movieId": 1,
            "rating": 4.0,
            "timestamp": 1260759144,
        }

    def test_get_ratings_not_found(self, client):
        r = client.get("/ratings/999999")
        assert r.status_code == 404
        assert r.json() == {"error": "No ratings found"}

    def test_get_average_rating(self, client):
        r = client.get("/ratings/3/average")
        assert r.status_code == 200
        assert r.json() == {"movieId": 3, "average_rating": 2.75, "count": 2}

    def test_get_average_rating_not_found(self, client):
        r = client.get("/ratings/4/average")
        assert r.status_code == 404

    def test_ratings_unavailable(self, broken_client):
        r = broken_client.get("/ratings/1")
        assert r.status_code == 500
        assert r.json() == {"error": "Failed to query the dataset"}
