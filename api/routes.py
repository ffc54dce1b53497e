"""
Catalog routes mounted under /api.

Each route runs exactly one catalog query. Empty results raise LookupMiss,
which the application turns into a plain-text 404.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from catalog import queries
from catalog.errors import LookupMiss, MissingParameterError
from catalog.models import Author, Work
from catalog.store import Catalog
from utilities.logger import CatalogLogger

AUTHOR_NOT_FOUND = "Autor no encontrado"

router = APIRouter(prefix="/api", tags=["Catalog"])
lookup_logger = CatalogLogger("api.routes")


def get_catalog(request: Request) -> Catalog:
    """Catalog loaded at startup and shared by every request."""
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Catalog not loaded"
        )
    return catalog


def _authors_response(authors: List[Author]) -> JSONResponse:
    return JSONResponse(content=[author.to_wire() for author in authors])


def _works_response(works: List[Work]) -> JSONResponse:
    return JSONResponse(content=[work.to_wire() for work in works])


@router.get("", response_model=List[Author])
async def list_authors(catalog: Catalog = Depends(get_catalog)):
    """Full catalog, sorted by surname."""
    authors = queries.list_authors(catalog)
    lookup_logger.log_lookup("all", len(authors))
    return _authors_response(authors)


@router.get("/apellido/{apellido}", response_model=List[Author])
async def authors_by_surname(apellido: str, catalog: Catalog = Depends(get_catalog)):
    """
    Authors whose surname contains the given text.

    - **apellido**: Surname fragment, case-insensitive
    """
    authors = queries.filter_by_surname(catalog, apellido)
    lookup_logger.log_lookup("surname", len(authors), apellido=apellido)

    if not authors:
        raise LookupMiss(AUTHOR_NOT_FOUND)
    return _authors_response(authors)


@router.get("/nombre_apellido/{nombre}/{apellido}", response_model=List[Author])
async def author_by_full_name(
    nombre: str,
    apellido: str,
    catalog: Catalog = Depends(get_catalog)
):
    """
    Author with exactly this name and surname.

    - **nombre**: First name, case-insensitive
    - **apellido**: Surname, case-insensitive
    """
    authors = queries.find_by_full_name(catalog, nombre, apellido)
    lookup_logger.log_lookup("full_name", len(authors), nombre=nombre, apellido=apellido)

    if not authors:
        raise LookupMiss("autor no encontrado")
    return _authors_response(authors)


@router.get("/nombre/{nombre}", response_model=List[Author])
async def authors_by_name_and_surname_prefix(
    nombre: str,
    apellido: Optional[str] = Query(None, description="Start of the surname"),
    catalog: Catalog = Depends(get_catalog)
):
    """
    Authors with this exact name whose surname starts with ``apellido``.

    - **nombre**: First name, case-insensitive
    - **apellido**: Surname prefix, required
    """
    try:
        authors = queries.filter_by_name_and_surname_prefix(catalog, nombre, apellido)
    except MissingParameterError as e:
        lookup_logger.log_missing_parameter("name_surname_prefix", e.parameter)
        raise

    lookup_logger.log_lookup("name_surname_prefix", len(authors), nombre=nombre, apellido=apellido)

    if not authors:
        raise LookupMiss(AUTHOR_NOT_FOUND)
    return _authors_response(authors)


@router.get("/edicion/{year}", response_model=List[Work])
async def works_by_edition_year(year: str, catalog: Catalog = Depends(get_catalog)):
    """
    Works from every author edited in the given year.

    - **year**: Edition year
    """
    works = queries.works_by_edition_year(catalog, year)
    lookup_logger.log_lookup("edition_year", len(works), year=year)

    if not works:
        raise LookupMiss(f"Ninguna obra coincide con el año {year}")
    return _works_response(works)
