"""FastAPI application exposing the manifest over read-only HTTP endpoints."""

from __future__ import annotations

from typing import Any, Callable, Dict, List

import uvicorn
from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from ..catalog import MANIFEST
from ..manifest import CategoryManifest
from ..models import Category
from ..navigation import NavigationBuilder


class CategoryModel(BaseModel):
    name: str
    path: str
    files: List[str]


class CategoryListResponse(BaseModel):
    categories: List[CategoryModel]


class ResolveResponse(BaseModel):
    category: str
    file: str
    path: str


class NavigationResponse(BaseModel):
    title: str
    sections: List[Dict[str, Any]]


class HealthResponse(BaseModel):
    status: str
    categories: int


def _default_manifest() -> CategoryManifest:
    return MANIFEST


def _to_model(category: Category) -> CategoryModel:
    return CategoryModel(
        name=category.display_name,
        path=category.path,
        files=list(category.files),
    )


def create_app(
    manifest_factory: Callable[[], CategoryManifest] = _default_manifest,
    navigation: NavigationBuilder | None = None,
) -> FastAPI:
    """Create the FastAPI application serving manifest lookups."""

    app = FastAPI(title="DocManifest Service", version="1.0.0")
    navigation_builder = navigation or NavigationBuilder()

    async def get_manifest() -> CategoryManifest:
        return manifest_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health(manifest: CategoryManifest = Depends(get_manifest)) -> HealthResponse:
        return HealthResponse(status="ok", categories=len(manifest))

    @app.get("/categories", response_model=CategoryListResponse)
    async def list_categories(
        manifest: CategoryManifest = Depends(get_manifest),
    ) -> CategoryListResponse:
        return CategoryListResponse(
            categories=[_to_model(category) for _, category in manifest.list()]
        )

    @app.get("/categories/{name}", response_model=CategoryModel)
    async def get_category(
        name: str,
        manifest: CategoryManifest = Depends(get_manifest),
    ) -> CategoryModel:
        category = manifest.get(name)
        if category is None:
            raise HTTPException(status_code=404, detail=f"Unknown category: {name}")
        return _to_model(category)

    @app.get("/categories/{name}/files/{filename}", response_model=ResolveResponse)
    async def resolve_file(
        name: str,
        filename: str,
        manifest: CategoryManifest = Depends(get_manifest),
    ) -> ResolveResponse:
        resolved = manifest.resolve_path(name, filename)
        if resolved is None:
            raise HTTPException(
                status_code=404, detail=f"No file {filename!r} in category {name!r}"
            )
        return ResolveResponse(category=name, file=filename, path=resolved)

    @app.get("/navigation", response_model=NavigationResponse)
    async def get_navigation(
        manifest: CategoryManifest = Depends(get_manifest),
    ) -> NavigationResponse:
        return NavigationResponse(
            title=navigation_builder.title,
            sections=navigation_builder.build_tree(manifest),
        )

    return app


def run_service(
    host: str = "127.0.0.1",
    port: int = 8000,
    manifest: CategoryManifest | None = None,
    navigation: NavigationBuilder | None = None,
) -> None:  # pragma: no cover - integration path
    selected = manifest if manifest is not None else MANIFEST
    app = create_app(lambda: selected, navigation)
    uvicorn.run(app, host=host, port=port)
