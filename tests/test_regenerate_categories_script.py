"""Tests for the standalone category regeneration script."""

from __future__ import annotations

from pathlib import Path

import regenerate_categories


def _make_site(tmp_path: Path) -> Path:
    docs = tmp_path / "docs"
    (docs / "devops").mkdir(parents=True)
    (docs / "index.md").write_text("# Home\n", encoding="utf-8")
    (docs / "devops" / "k8s.md").write_text(
        "---\ntitle: k8s\ntags:\n  - Kubernetes\n  - DevOps\n---\n", encoding="utf-8"
    )
    config_file = tmp_path / "mkdocs.yml"
    config_file.write_text(
        "site_name: Test Blog\n"
        "docs_dir: docs\n"
        "extra:\n"
        "  category_pages:\n"
        "    directory: categories\n",
        encoding="utf-8",
    )
    return config_file


def test_main_regenerates_pages(tmp_path: Path, capsys) -> None:
    config_file = _make_site(tmp_path)

    assert regenerate_categories.main([str(config_file)]) == 0

    target = tmp_path / "docs" / "categories"
    assert sorted(p.name for p in target.iterdir()) == ["DevOps.html", "Kubernetes.html"]
    out = capsys.readouterr().out
    assert "Found 2 tags" in out
    assert "Generated: 2 files" in out


def test_main_dry_run_writes_nothing(tmp_path: Path, capsys) -> None:
    config_file = _make_site(tmp_path)

    assert regenerate_categories.main([str(config_file), "--dry-run"]) == 0

    assert not (tmp_path / "docs" / "categories").exists()
    out = capsys.readouterr().out
    assert "[DRY RUN]" in out
    assert "Kubernetes.html" in out
    assert "Would generate: 2 files" in out
