"""Article routes. Reads are public; writes need REPORTER plus ownership or an editorial role."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from newsroom.domain.article.command.article import (
    SLUG_PATTERN,
    CreateArticle,
    CreateArticleHandler,
    DeleteArticle,
    DeleteArticleHandler,
    UpdateArticle,
    UpdateArticleHandler,
)
from newsroom.domain.article.query.article import (
    ArticleDTO,
    GetArticle,
    GetArticleHandler,
    ListArticles,
    ListArticlesHandler,
)

router = APIRouter(prefix="/articles", tags=["Articles"], route_class=DishkaRoute)


class UpdateArticleRequest(BaseModel):
    title_uz: str | None = Field(default=None, min_length=1, max_length=500)
    title_ru: str | None = Field(default=None, max_length=500)
    content_uz: str | None = Field(default=None, min_length=1)
    content_ru: str | None = None
    slug: str | None = Field(default=None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    thumbnail: str | None = None
    is_published: bool | None = None
    category_id: UUID | None = None
    newspaper_id: UUID | None = None


class ArticleListResponse(BaseModel):
    articles: list[ArticleDTO]


@router.post("", response_model=ArticleDTO, status_code=201)
async def create_article(
    body: CreateArticle, handler: FromDishka[CreateArticleHandler]
) -> ArticleDTO:
    """Write an article. The caller becomes its author."""
    result = await handler.run(body)
    return result.article


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    handler: FromDishka[ListArticlesHandler],
    category_id: UUID | None = None,
    author_id: UUID | None = None,
    newspaper_id: UUID | None = None,
    is_published: bool | None = None,
) -> ArticleListResponse:
    result = await handler.run(
        ListArticles(
            category_id=category_id,
            author_id=author_id,
            newspaper_id=newspaper_id,
            is_published=is_published,
        )
    )
    return ArticleListResponse(articles=result.articles)


@router.get("/slug/{slug}", response_model=ArticleDTO)
async def get_article_by_slug(slug: str, handler: FromDishka[GetArticleHandler]) -> ArticleDTO:
    """Fetch an article by slug. Counts as a view."""
    result = await handler.run(GetArticle(slug=slug))
    return result.article


@router.get("/{article_id}", response_model=ArticleDTO)
async def get_article(article_id: UUID, handler: FromDishka[GetArticleHandler]) -> ArticleDTO:
    """Fetch an article. Counts as a view."""
    result = await handler.run(GetArticle(article_id=article_id))
    return result.article


@router.patch("/{article_id}", response_model=ArticleDTO)
async def update_article(
    article_id: UUID,
    body: UpdateArticleRequest,
    handler: FromDishka[UpdateArticleHandler],
) -> ArticleDTO:
    result = await handler.run(
        UpdateArticle(article_id=article_id, **body.model_dump(exclude_unset=True))
    )
    return result.article


@router.delete("/{article_id}", status_code=204)
async def delete_article(
    article_id: UUID, handler: FromDishka[DeleteArticleHandler]
) -> Response:
    await handler.run(DeleteArticle(article_id=article_id))
    return Response(status_code=204)
