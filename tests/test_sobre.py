"""Tests for the timeline API and page."""

import pytest
from httpx import AsyncClient

from app.models.sobre import Sobre
from app.services.sobre_service import SobreService


@pytest.mark.asyncio
async def test_get_sobre(client: AsyncClient, sample_sobre: list[Sobre]):
    """Test timeline entries come back sorted by year."""
    response = await client.get("/api/sobre")

    assert response.status_code == 200
    data = response.json()
    assert [entry["ano"] for entry in data] == [2018, 2019, 2021]


@pytest.mark.asyncio
async def test_get_sobre_image_urls(client: AsyncClient, sample_sobre: list[Sobre]):
    """Test imageUrl is set only for entries holding image bytes."""
    response = await client.get("/api/sobre")

    by_year = {entry["ano"]: entry for entry in response.json()}
    assert by_year[2021]["imageUrl"] == "/api/image/sobre/2021"
    assert by_year[2018]["imageUrl"] is None
    assert by_year[2019]["imageUrl"] is None
    assert by_year[2021]["descricao"] == "Lançamento da primeira antologia."


@pytest.mark.asyncio
async def test_get_sobre_empty(client: AsyncClient):
    """Test an empty timeline."""
    response = await client.get("/api/sobre")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_sobre_page(client: AsyncClient, sample_sobre: list[Sobre]):
    """Test the page renders entries in year order."""
    response = await client.get("/sobre")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    assert "Sobre Nós" in html
    assert html.index('data-ano="2018"') < html.index('data-ano="2019"') < html.index('data-ano="2021"')


@pytest.mark.asyncio
async def test_sobre_page_images(client: AsyncClient, sample_sobre: list[Sobre]):
    """Test only entries with images get an img tag."""
    response = await client.get("/sobre")

    html = response.text
    assert 'src="/api/image/sobre/2021"' in html
    assert 'alt="Evento de 2021 - Coletivo À Margem"' in html
    assert "/api/image/sobre/2018" not in html


@pytest.mark.asyncio
async def test_sobre_page_show_more(client: AsyncClient, sample_sobre: list[Sobre]):
    """Test long descriptions get a drawer, short ones do not."""
    response = await client.get("/sobre")

    html = response.text
    assert html.count("Mostrar mais") == 1
    assert 'href="#detalhes-2018"' in html
    assert 'id="detalhes-2018"' in html
    assert "Detalhes de 2018" in html
    assert 'id="detalhes-2021"' not in html


@pytest.mark.asyncio
async def test_sobre_page_load_failure(client: AsyncClient, monkeypatch: pytest.MonkeyPatch):
    """Test a failing load still renders an empty timeline."""
    from sqlalchemy.exc import OperationalError

    async def broken(self):
        raise OperationalError("SELECT", {}, Exception("no such table: sobre"))

    monkeypatch.setattr(SobreService, "get_timeline", broken)

    response = await client.get("/sobre")

    assert response.status_code == 200
    assert "timeline-item" not in response.text.split('<ol class="timeline">')[1].split("</ol>")[0]


@pytest.mark.asyncio
async def test_sobre_page_unexpected_failure(client: AsyncClient, monkeypatch: pytest.MonkeyPatch):
    """Test any load error, not only database ones, still renders the page."""

    async def broken(self):
        raise ValueError("bad row")

    monkeypatch.setattr(SobreService, "get_timeline", broken)

    response = await client.get("/sobre")

    assert response.status_code == 200
    assert "Sobre Nós" in response.text
    assert "data-ano=" not in response.text


@pytest.mark.asyncio
async def test_root_redirects_to_sobre(client: AsyncClient):
    """Test the site root lands on the timeline."""
    response = await client.get("/")

    assert response.status_code == 307
    assert response.headers["location"] == "/sobre"


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    """Test the liveness probe."""
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
