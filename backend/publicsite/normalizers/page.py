from publicsite.domain.content import Page


def normalize_page(page):
    return Page(
        id=str(page.id),
        site_id=str(page.site_id),
        title=page.title,
        slug=page.slug,
        content=page.content,
        status="published" if page.status == "published" else "draft",
        seo_title=page.seo_title,
        seo_description=page.seo_description,
        page_type=page.page_type,
    )
