"""
MkDocs hook: 빌드가 끝날 때마다 태그별 카테고리 페이지를 다시 생성한다.

빌드 중 각 페이지 frontmatter의 tags를 모아 두었다가,
on_post_build에서 docs/<카테고리 디렉토리>를 통째로 지우고
태그마다 `<태그>.html` 한 개씩 frontmatter만 있는 페이지를 쓴다.

mkdocs.yml 설정:

    hooks:
      - hooks/path_filters.py
      - hooks/category_pages.py
    extra:
      category_pages:
        directory: categories

주의: 대상 디렉토리는 매 빌드마다 재귀 삭제된다.
생성된 카테고리 페이지 외의 파일을 두면 안 된다.
"""

import os
import shutil

from mkdocs.utils import meta as meta_utils

from path_filters import escape_path

DEFAULT_DIRECTORY = "categories"

# 빌드 중 수집된 태그
_tags = set()


def category_page_content(tag: str) -> str:
    return (
        "---\n"
        "layout: category\n"
        f'parmalink: "/categories/{escape_path(tag)}"\n'
        f"category: {tag}\n"
        "---\n"
    )


def categories_dir(config) -> str:
    """docs_dir + extra.category_pages.directory 절대 경로를 반환한다."""
    source = os.path.abspath(os.path.expanduser(config["docs_dir"]))
    extra = config.get("extra") or {}
    path = (extra.get("category_pages") or {}).get("directory", DEFAULT_DIRECTORY)
    return os.path.join(source, path)


def page_tags(meta) -> list:
    """frontmatter의 tags 값(리스트 또는 단일 문자열)을 태그 리스트로 정규화한다."""
    tags = (meta or {}).get("tags")
    if not tags:
        return []
    if isinstance(tags, str):
        tags = [tags]
    return [str(t).strip() for t in tags if t is not None and str(t).strip()]


def collect_tags(docs_dir: str, exclude_dir: str = None) -> set:
    """docs/ 디렉토리를 재귀 스캔하여 모든 글의 태그를 모은다."""
    tags = set()
    exclude = os.path.abspath(exclude_dir) if exclude_dir else None

    for root, dirs, files in os.walk(docs_dir):
        dirs[:] = [
            d for d in dirs
            if not d.startswith(".") and os.path.abspath(os.path.join(root, d)) != exclude
        ]

        for fname in files:
            if not fname.endswith(".md"):
                continue

            fpath = os.path.join(root, fname)
            try:
                with open(fpath, encoding="utf-8") as f:
                    content = f.read()
            except (OSError, UnicodeDecodeError):
                continue

            _, meta = meta_utils.get_data(content)
            tags.update(page_tags(meta))

    return tags


def regenerate_category_pages(config, tags) -> None:
    """카테고리 디렉토리를 비우고 태그마다 페이지를 새로 쓴다.

    파일시스템 오류는 그대로 전파된다 (부모 디렉토리가 없으면 FileNotFoundError).
    중간에 실패하면 일부 페이지만 생성된 상태로 남는다.
    """
    dir_path = categories_dir(config)

    if os.path.islink(dir_path):
        # 링크만 지우고 링크 대상은 건드리지 않는다
        print(f"  category_pages: delete {dir_path}")
        os.unlink(dir_path)
    elif os.path.exists(dir_path):
        print(f"  category_pages: delete {dir_path}")
        shutil.rmtree(dir_path)

    print(f"  category_pages: create {dir_path}")
    os.mkdir(dir_path)

    # 파일명은 slug가 아니라 원래 태그 문자열을 쓴다
    for tag in sorted(tags):
        file_path = os.path.join(dir_path, f"{tag}.html")
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(category_page_content(tag))
        print(f"  category_pages: generated: {file_path}")


# ── MkDocs 훅 ─────────────────────────────────────────────────────────────────

def on_pre_build(config, **kwargs):
    # mkdocs serve 재빌드 시 이전 빌드의 태그가 남지 않도록 초기화
    _tags.clear()


def on_page_markdown(markdown, page, config, files, **kwargs):
    _tags.update(page_tags(page.meta))
    return markdown


def on_post_build(config, **kwargs):
    regenerate_category_pages(config, _tags)
