"""회사 API 테스트.

Company API tests: CRUD, camelCase field mapping on partial updates, and
filtered search.
"""

from decimal import Decimal

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/companies"

C1 = {"handle": "c1", "name": "C1", "description": "Desc1", "num_employees": 1, "logo_url": "http://c1.img"}
C2 = {"handle": "c2", "name": "C2", "description": "Desc2", "num_employees": 2, "logo_url": None}


class TestCompanyCreate:
    async def test_create_company(self, client: AsyncClient, db, admin_token):
        """회사 생성: 중복 확인 후 INSERT."""
        new = {"handle": "new", "name": "New", "description": "DescNew", "num_employees": 10, "logo_url": None}
        db.returns([], [new])
        res = await client.post(URL, json={
            "handle": "new",
            "name": "New",
            "description": "DescNew",
            "numEmployees": 10,
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        company = res.json()["company"]
        assert company["numEmployees"] == 10
        assert company["logoUrl"] is None
        assert db.last_params == ("new", "New", "DescNew", 10, None)

    async def test_create_duplicate(self, client: AsyncClient, db, admin_token):
        """같은 handle 이면 409."""
        db.returns([C1])
        res = await client.post(URL, json={"handle": "c1", "name": "C1"}, headers=auth_header(admin_token))
        assert res.status_code == 409
        assert len(db.calls) == 1

    async def test_create_non_admin(self, client: AsyncClient, db, user_token):
        res = await client.post(URL, json={"handle": "x", "name": "X"}, headers=auth_header(user_token))
        assert res.status_code == 403
        assert db.calls == []


class TestCompanyList:
    async def test_list_all(self, client: AsyncClient, db):
        db.returns([C1, C2])
        res = await client.get(URL)
        assert res.status_code == 200
        assert [c["handle"] for c in res.json()["companies"]] == ["c1", "c2"]
        assert db.last_sql.endswith("FROM companies ORDER BY name")

    async def test_filter(self, client: AsyncClient, db):
        db.returns([C2])
        res = await client.get(URL, params={"nameLike": "2", "minEmployees": "2", "maxEmployees": "5"})
        assert res.status_code == 200
        assert res.json()["companies"][0]["handle"] == "c2"
        assert "WHERE name ILIKE $1 AND num_employees >= $2 AND num_employees <= $3" in db.last_sql
        assert db.last_params == ("%2%", 2, 5)

    async def test_filter_min_above_max(self, client: AsyncClient, db):
        """최소 > 최대 이면 400, 쿼리 미실행."""
        res = await client.get(URL, params={"minEmployees": "500", "maxEmployees": "100"})
        assert res.status_code == 400
        assert db.calls == []

    async def test_filter_unknown_key(self, client: AsyncClient, db):
        res = await client.get(URL, params={"title": "x"})
        assert res.status_code == 400
        assert db.calls == []

    async def test_filter_no_match(self, client: AsyncClient, db):
        res = await client.get(URL, params={"nameLike": "nope"})
        assert res.status_code == 404


class TestCompanyGet:
    async def test_get_with_jobs(self, client: AsyncClient, db):
        db.returns([C1], [{"id": 1, "title": "j1", "salary": 100, "equity": Decimal("0.1")}])
        res = await client.get(f"{URL}/c1")
        assert res.status_code == 200
        company = res.json()["company"]
        assert company["logoUrl"] == "http://c1.img"
        assert company["jobs"] == [{"id": 1, "title": "j1", "salary": 100, "equity": "0.1"}]
        assert db.last_params == ("c1",)

    async def test_get_missing(self, client: AsyncClient, db):
        res = await client.get(f"{URL}/nope")
        assert res.status_code == 404
        assert len(db.calls) == 1


class TestCompanyUpdate:
    async def test_update_maps_camel_case_fields(self, client: AsyncClient, db, admin_token):
        """numEmployees → num_employees 로 매핑, handle은 마지막 파라미터."""
        db.returns([{**C1, "name": "Acme", "num_employees": 2, "description": "desc"}])
        res = await client.patch(f"{URL}/c1", json={
            "name": "Acme",
            "numEmployees": 2,
            "description": "desc",
        }, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json()["company"]["name"] == "Acme"
        assert db.last_sql.startswith(
            'UPDATE companies SET "name"=$1, "num_employees"=$2, "description"=$3 WHERE handle = $4'
        )
        assert db.last_params == ("Acme", 2, "desc", "c1")

    async def test_update_can_null_field(self, client: AsyncClient, db, admin_token):
        db.returns([{**C1, "logo_url": None}])
        res = await client.patch(f"{URL}/c1", json={"logoUrl": None}, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert '"logo_url"=$1' in db.last_sql
        assert db.last_params == (None, "c1")

    async def test_update_handle_rejected(self, client: AsyncClient, db, admin_token):
        res = await client.patch(f"{URL}/c1", json={"handle": "c9"}, headers=auth_header(admin_token))
        assert res.status_code == 422

    async def test_update_empty(self, client: AsyncClient, db, admin_token):
        res = await client.patch(f"{URL}/c1", json={}, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert db.calls == []

    async def test_update_missing(self, client: AsyncClient, db, admin_token):
        res = await client.patch(f"{URL}/nope", json={"name": "X"}, headers=auth_header(admin_token))
        assert res.status_code == 404


class TestCompanyDelete:
    async def test_delete(self, client: AsyncClient, db, admin_token):
        db.returns([{"handle": "c1"}])
        res = await client.delete(f"{URL}/c1", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json() == {"deleted": "c1"}

    async def test_delete_missing(self, client: AsyncClient, db, admin_token):
        res = await client.delete(f"{URL}/nope", headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_delete_anon(self, client: AsyncClient, db):
        res = await client.delete(f"{URL}/c1")
        assert res.status_code == 401


class TestCompanyIntegerBounds:
    async def test_fractional_bounds_round_inward(self, client: AsyncClient, db):
        """10.2 ~ 10.8 사이 정수는 없음: >= 11 AND <= 10 으로 바인딩, 결과 없음 404."""
        res = await client.get(URL, params={"minEmployees": "10.2", "maxEmployees": "10.8"})
        assert res.status_code == 404
        assert "num_employees >= $1 AND num_employees <= $2" in db.last_sql
        assert db.last_params == (11, 10)


class TestCompanyUpdateNulls:
    async def test_null_name_rejected(self, client: AsyncClient, db, admin_token):
        res = await client.patch(f"{URL}/c1", json={"name": None}, headers=auth_header(admin_token))
        assert res.status_code == 422
        assert db.calls == []
