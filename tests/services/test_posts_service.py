import datetime
import logging

import pytest

from app.repos.posts_repo import FilePostsRepo
from app.schemas.blog import PostData, PostSummary
from app.services.posts_service import (
    PostNotFoundError,
    PostsService,
    _convert_date,
    _derive_title,
    parse_post_metadata,
)
from tests.conftest import FakeRepo, write_post

BASE = "/api/posts-images"


def make_service(posts):
    return PostsService(repo=FakeRepo(posts), image_base_url=BASE)


def test_get_all_posts_data_sorts_by_date_desc():
    service = make_service(
        {
            "older.md": """
            ---
            slug: older
            date: 2023-12-31
            title: Older Post
            ---
            Older content.
            """,
            "no-date.md": """
            ---
            slug: no-date
            title: No Date
            ---
            content
            """,
            "newer.md": """
            ---
            slug: newer
            date: 2024-06-01T09:30:00
            title: Newer Post
            tags: [python, ai]
            summary: Newest one
            ---
            The body of the newer post.
            """,
        }
    )

    result = service.get_all_posts_data()

    assert [post.slug for post in result] == ["newer", "older", "no-date"]
    assert all(isinstance(post, PostSummary) for post in result)
    assert not hasattr(result[0], "contentHtml")
    assert result[0].date == "2024-06-01T09:30:00"
    assert result[0].tags == ["python", "ai"]
    assert result[0].summary == "Newest one"
    assert result[1].date == "2023-12-31"


def test_get_all_posts_data_skips_unreadable_posts(caplog):
    service = make_service(
        {
            "ok.md": "---\nslug: ok\ntitle: OK\n---\nbody",
            "broken.md": None,
        }
    )

    with caplog.at_level(logging.WARNING):
        result = service.get_all_posts_data()

    assert [p.slug for p in result] == ["ok"]
    assert any("broken.md" in rec.message for rec in caplog.records)


def test_get_post_data_renders_html_and_rewrites_images():
    service = make_service(
        {
            "first.md": """
            ---
            slug: other
            title: Other
            ---
            other
            """,
            "hello.md": """
            ---
            slug: hello
            date: 2024-08-01
            title: Hello Title
            tags: [a]
            summary: greeting
            ---
            # Heading

            ![pic](./images/pic.png)
            """,
        }
    )

    result = service.get_post_data("hello")

    assert isinstance(result, PostData)
    assert result.id == "hello"
    assert result.slug == "hello"
    assert result.title == "Hello Title"
    assert result.date == "2024-08-01"
    assert result.tags == ["a"]
    assert result.summary == "greeting"
    assert '<h1 id="heading">Heading</h1>' in result.contentHtml
    assert 'src="/api/posts-images/pic.png"' in result.contentHtml


def test_get_post_data_raises_when_slug_missing():
    service = make_service({"a.md": "---\nslug: a\n---\nA"})

    with pytest.raises(PostNotFoundError) as excinfo:
        service.get_post_data("missing")

    assert str(excinfo.value) == "Post with slug 'missing' not found"
    assert excinfo.value.slug == "missing"


def test_get_post_data_first_matching_file_wins():
    service = make_service(
        {
            "a.md": "---\nslug: dup\ntitle: First\n---\nA",
            "b.md": "---\nslug: dup\ntitle: Second\n---\nB",
        }
    )

    assert service.get_post_data("dup").title == "First"


def test_get_all_tags_deduplicates_in_first_seen_order():
    service = make_service(
        {
            "a.md": "---\ntags: [React, Next.js]\n---\nA",
            "b.md": "---\ntags: [Next.js, Python]\n---\nB",
            "c.md": "---\ntags: not-a-list\n---\nC",
            "d.md": "---\ntitle: no tags\n---\nD",
        }
    )

    assert service.get_all_tags() == ["React", "Next.js", "Python"]


def test_service_reads_posts_from_disk(tmp_path):
    write_post(
        tmp_path,
        "2024-hello.md",
        """
        ---
        slug: hello
        date: 2024-01-10
        title: Hello
        tags: [intro]
        ---
        Hi **there**
        """,
    )
    service = PostsService(repo=FilePostsRepo(tmp_path), image_base_url=BASE)

    [summary] = service.get_all_posts_data()
    detail = service.get_post_data("hello")

    assert summary.id == "2024-hello"
    assert detail.contentHtml == "<p>Hi <strong>there</strong></p>"
    assert service.get_all_tags() == ["intro"]


def test_parse_post_metadata_falls_back_to_file_id():
    data = parse_post_metadata("my_first-post", {})

    assert data == {
        "id": "my_first-post",
        "slug": "my_first-post",
        "title": "My First Post",
        "date": None,
        "tags": [],
        "summary": None,
    }


def test_derive_title_prefers_front_matter():
    assert _derive_title({"title": "Given"}, "ignored") == "Given"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (datetime.date(2024, 1, 2), "2024-01-02"),
        (datetime.datetime(2024, 1, 2, 3, 4, 5), "2024-01-02T03:04:05"),
        ("2024-01-02", "2024-01-02"),
        (None, None),
    ],
)
def test_convert_date(value, expected):
    assert _convert_date(value) == expected


def test_numeric_summary_is_kept_as_text():
    service = make_service({"a.md": "---\nslug: a\nsummary: 2024\n---\nbody"})

    [summary] = service.get_all_posts_data()
    detail = service.get_post_data("a")

    assert summary.summary == "2024"
    assert detail.summary == "2024"


def test_get_all_tags_drops_null_entries_like_post_tags():
    service = make_service({"a.md": "---\nslug: a\ntags: [x, null, 3]\n---\nbody"})

    [summary] = service.get_all_posts_data()

    assert summary.tags == ["x", "3"]
    assert service.get_all_tags() == ["x", "3"]
