import pytest

from doc_scout.seeds import SeedInputError, load_seeds, parse_seed_list


def test_parse_seed_list_trims_and_skips_blanks():
    text = "https://x/a\r\n\r\n   https://x/b  \n\n\thttps://x/c\n"
    assert parse_seed_list(text) == ["https://x/a", "https://x/b", "https://x/c"]


def test_parse_seed_list_has_no_comment_syntax():
    assert parse_seed_list("# not a comment\nhttps://x/a") == ["# not a comment", "https://x/a"]


def test_load_seeds_text_file(tmp_path):
    seeds = tmp_path / "urls.txt"
    seeds.write_text("https://learn.microsoft.com/a\n\nhttps://learn.microsoft.com/b\n", encoding="utf-8")
    assert load_seeds(seeds) == ["https://learn.microsoft.com/a", "https://learn.microsoft.com/b"]


def test_load_seeds_sitemap(tmp_path):
    sitemap = tmp_path / "sitemap.xml"
    sitemap.write_text(
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
        "<url><loc> https://learn.microsoft.com/a </loc></url>"
        "<url><loc>https://learn.microsoft.com/b</loc></url>"
        "</urlset>",
        encoding="utf-8",
    )
    assert load_seeds(sitemap) == ["https://learn.microsoft.com/a", "https://learn.microsoft.com/b"]


def test_missing_seed_file_is_fatal(tmp_path):
    with pytest.raises(SeedInputError) as excinfo:
        load_seeds(tmp_path / "urls.txt")
    assert isinstance(excinfo.value, FileNotFoundError)
    assert "urls.txt" in str(excinfo.value)


def test_empty_seed_file(tmp_path):
    seeds = tmp_path / "urls.txt"
    seeds.write_text("\n\n", encoding="utf-8")
    assert load_seeds(seeds) == []
