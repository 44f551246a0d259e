"""
MkDocs hook: 템플릿용 경로 필터(escape_path, unescape_path)를 Jinja2 환경에 등록한다.
카테고리 링크는 태그의 slug를 URL 인코딩한 값을 쓰고,
인코딩된 경로를 화면에 보여줄 때는 다시 디코딩한다.
"""

import unicodedata
from urllib.parse import quote, unquote

# URL path segment에서 인코딩하지 않는 문자 (unreserved 외 sub-delims, ':', '@', '/')
PATH_SAFE = "/!$&'()*+,;=:@"


def _is_slug_char(ch: str) -> bool:
    # 문자(L*), 결합 기호(M*), 십진 숫자(Nd)만 slug에 남긴다
    category = unicodedata.category(ch)
    return category[0] in "LM" or category == "Nd"


def slugify(text: str) -> str:
    """소문자 변환 후 문자/기호/숫자가 아닌 구간을 '-' 하나로 합친다."""
    if text is None:
        return ""
    chars = []
    for ch in str(text).lower():
        if _is_slug_char(ch):
            chars.append(ch)
        elif chars and chars[-1] != "-":
            chars.append("-")
    return "".join(chars).strip("-")


def escape_path(text: str) -> str:
    return quote(slugify(text), safe=PATH_SAFE)


def unescape_path(text: str) -> str:
    # slugify는 되돌리지 않는다 (퍼센트 인코딩만 디코딩)
    if "%" not in text:
        return text
    return unquote(text)


FILTERS = {
    "escape_path": escape_path,
    "unescape_path": unescape_path,
}


def on_env(env, config, files, **kwargs):
    env.filters.update(FILTERS)
    return env
