def normalize_page_summary(page):
    sections = page.get("sections") or []

    return {
        "id": page.get("id"),
        "title": page.get("title") or {},
        "section_count": len(sections),
        "section_ids": [s.get("id") for s in sections],
    }
