#!/usr/bin/env python3
"""
mkdocs build 없이 카테고리 페이지만 다시 생성하는 스크립트.
- mkdocs.yml을 읽어 docs_dir, extra.category_pages.directory를 확인
- docs/ 아래 모든 .md frontmatter의 tags를 수집
- hooks/category_pages.py와 같은 방식으로 카테고리 디렉토리를 재생성

사용법:
    python scripts/regenerate_categories.py [mkdocs.yml] [--dry-run]
"""

import os
import sys

from mkdocs.config import load_config

# 설치하지 않은 체크아웃에서 스크립트를 직접 실행할 때만 필요하다
HOOKS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "hooks")
if HOOKS_DIR not in sys.path:
    sys.path.insert(0, HOOKS_DIR)

from category_pages import categories_dir, collect_tags, regenerate_category_pages  # noqa: E402

DEFAULT_CONFIG = "mkdocs.yml"


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    dry_run = "--dry-run" in argv
    args = [a for a in argv if not a.startswith("--")]
    config_file = args[0] if args else DEFAULT_CONFIG

    config = load_config(config_file=config_file)
    target = categories_dir(config)
    tags = collect_tags(config["docs_dir"], exclude_dir=target)

    print(f"{'[DRY RUN] ' if dry_run else ''}Found {len(tags)} tags in {config['docs_dir']}")

    if dry_run:
        for tag in sorted(tags):
            print(f"  [PREVIEW] {os.path.join(target, tag + '.html')}")
        print(f"\nWould generate: {len(tags)} files")
        return 0

    regenerate_category_pages(config, tags)
    print(f"\nGenerated: {len(tags)} files")
    return 0


if __name__ == "__main__":
    sys.exit(main())
