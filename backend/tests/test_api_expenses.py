"""Tests for expenses API endpoints."""

import uuid


class TestExpensesAPI:
    """Test expense CRUD endpoints."""

    def test_create_expense(self, client, sample_user):
        response = client.post("/api/v1/expenses", json={
            "userId": sample_user.id,
            "title": " Coffee ",
            "amount": 3.5,
            "category": "food",
            "date": "2024-03-01"
        })
        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Expense created successfully"
        expense = data["expense"]
        assert expense["title"] == "Coffee"
        assert expense["amount"] == 3.5
        assert expense["userId"] == sample_user.id
        assert expense["description"] == ""

    def test_create_rejects_negative_amount(self, client, sample_user):
        response = client.post("/api/v1/expenses", json={
            "userId": sample_user.id,
            "title": "Refund",
            "amount": -1,
            "category": "food",
            "date": "2024-03-01"
        })
        assert response.status_code == 422

    def test_create_rejects_blank_title(self, client, sample_user):
        """A title of only whitespace is empty after trimming."""
        response = client.post("/api/v1/expenses", json={
            "userId": sample_user.id,
            "title": "   ",
            "amount": 3,
            "category": "food",
            "date": "2024-03-01"
        })
        assert response.status_code == 422

    def test_create_rejects_unknown_category(self, client, sample_user):
        response = client.post("/api/v1/expenses", json={
            "userId": sample_user.id,
            "title": "Boat",
            "amount": 100,
            "category": "luxury",
            "date": "2024-03-01"
        })
        assert response.status_code == 422

    def test_create_rejects_malformed_user_id(self, client):
        response = client.post("/api/v1/expenses", json={
            "userId": "abc",
            "title": "Coffee",
            "amount": 3,
            "category": "food",
            "date": "2024-03-01"
        })
        assert response.status_code == 400
        assert response.json()["error"] == "invalid_input"

    def test_list_expenses(self, client, sample_user, sample_expenses):
        response = client.get(f"/api/v1/expenses/{sample_user.id}")
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 3
        assert [e["date"] for e in data["expenses"]] == ["2024-02-01", "2024-01-20", "2024-01-05"]

    def test_list_expenses_filters(self, client, sample_user, sample_expenses):
        response = client.get(f"/api/v1/expenses/{sample_user.id}", params={
            "category": "food",
            "startDate": "2024-01-10",
            "sort": "oldest"
        })
        data = response.json()
        assert data["count"] == 1
        assert data["expenses"][0]["title"] == "Dinner"

        response = client.get(f"/api/v1/expenses/{sample_user.id}", params={"category": "all", "limit": 2})
        assert response.json()["count"] == 2

    def test_list_expenses_invalid_range(self, client, sample_user):
        response = client.get(f"/api/v1/expenses/{sample_user.id}", params={
            "startDate": "2024-02-01",
            "endDate": "2024-01-01"
        })
        assert response.status_code == 400

    def test_list_expenses_unknown_category(self, client, sample_user):
        response = client.get(f"/api/v1/expenses/{sample_user.id}", params={"category": "luxury"})
        assert response.status_code == 400

    def test_get_expense(self, client, sample_expenses):
        expense = sample_expenses[0]
        response = client.get(f"/api/v1/expenses/detail/{expense.id}")
        assert response.status_code == 200
        assert response.json()["id"] == expense.id

    def test_get_expense_not_found(self, client):
        response = client.get(f"/api/v1/expenses/detail/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json()["message"] == "Expense not found"

    def test_update_expense(self, client, sample_expenses):
        expense = sample_expenses[0]
        response = client.put(f"/api/v1/expenses/{expense.id}", json={
            "title": "Weekly groceries",
            "category": "shopping"
        })
        assert response.status_code == 200
        data = response.json()["expense"]
        assert data["title"] == "Weekly groceries"
        assert data["category"] == "shopping"
        assert data["amount"] == 10.0

    def test_update_rejects_blank_title(self, client, sample_expenses):
        expense = sample_expenses[0]
        response = client.put(f"/api/v1/expenses/{expense.id}", json={"title": "   "})
        assert response.status_code == 422

        response = client.get(f"/api/v1/expenses/detail/{expense.id}")
        assert response.json()["title"] == "Groceries"

    def test_update_expense_not_found(self, client):
        response = client.put(f"/api/v1/expenses/{uuid.uuid4()}", json={"title": "x"})
        assert response.status_code == 404

    def test_delete_expense(self, client, sample_user, sample_expenses):
        expense = sample_expenses[1]
        response = client.delete(f"/api/v1/expenses/{expense.id}")
        assert response.status_code == 200
        assert response.json()["expense"]["id"] == expense.id

        response = client.get(f"/api/v1/expenses/{sample_user.id}")
        assert response.json()["count"] == 2

    def test_delete_expense_not_found(self, client):
        response = client.delete(f"/api/v1/expenses/{uuid.uuid4()}")
        assert response.status_code == 404
