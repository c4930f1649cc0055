"""Tests for the sample-data read surface."""

from surfjournal.data.mock_data import MOCK_ARTICLES, MOCK_CATEGORIES
from surfjournal.services.mock_service import MockNewsService


class TestMockNewsService:
    def setup_method(self) -> None:
        self.mock = MockNewsService()

    def test_list_paginates_and_counts_all(self) -> None:
        page = self.mock.list_articles(limit=3, offset=6)

        assert page.total == len(MOCK_ARTICLES)
        assert [a.id for a in page.items] == [7, 8]

    def test_featured_only(self) -> None:
        page = self.mock.list_articles(featured=True)

        assert page.items
        assert all(a.is_featured for a in page.items)

    def test_category_filter_uses_category_ids(self) -> None:
        page = self.mock.list_articles(category_id=1)

        assert page.total == 3
        assert {a.category_name for a in page.items} == {"Competitions"}
        assert {a.category_id for a in page.items} == {1}

    def test_unknown_category_matches_nothing(self) -> None:
        assert self.mock.list_articles(category_id=99).total == 0

    def test_search_title_excerpt_and_content(self) -> None:
        assert [a.id for a in self.mock.list_articles(search_query="NAZARÉ").items] == [2]
        assert [a.id for a in self.mock.list_articles(search_query="chicama").items] == [5]
        assert [a.id for a in self.mock.list_articles(search_query="peahi").items] == [6]

    def test_exclude(self) -> None:
        page = self.mock.list_articles(exclude_id=1)

        assert 1 not in [a.id for a in page.items]
        assert page.total == len(MOCK_ARTICLES) - 1

    def test_get_by_slug(self) -> None:
        article = self.mock.get_article_by_slug("nazare-swell-alert")

        assert article.id == 2
        assert article.category_id == 2
        assert self.mock.get_article_by_slug("no-such-slug") is None

    def test_related_same_category_without_self(self) -> None:
        article = self.mock.get_article_by_slug("saquarema-crowns-new-champion")

        related = self.mock.get_related(article)

        assert [a.id for a in related] == [4, 8]

    def test_categories_sorted_by_name(self) -> None:
        names = [c.name for c in self.mock.get_categories()]

        assert names == sorted(c["name"] for c in MOCK_CATEGORIES)

    def test_category_counts_match_articles(self) -> None:
        for category in self.mock.get_categories():
            assert category.news_count == self.mock.list_articles(category_id=category.id).total

    def test_created_id_in_fallback_range(self) -> None:
        assert all(100 <= self.mock.create_article() <= 1099 for _ in range(50))
