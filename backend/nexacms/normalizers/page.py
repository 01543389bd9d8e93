from .section import normalize_section


def _iso(value):
    return value.isoformat() if value else None


def normalize_page(page, admin=False, include_sections=True):
    data = {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "is_homepage": page.is_homepage,
        "seo": {
            "title": page.seo_title,
            "description": page.seo_description,
            "keywords": page.seo_keywords,
        },
        "published_at": _iso(page.published_at),
    }

    if admin:
        data["status"] = page.status
        data["created_at"] = _iso(page.created_at)
        data["updated_at"] = _iso(page.updated_at)

    if include_sections:
        sections = sorted(page.sections, key=lambda s: s.order)
        data["sections"] = [normalize_section(s, admin=admin) for s in sections]

    return data
