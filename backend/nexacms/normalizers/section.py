from nexacms.sections.registry import get_template


def normalize_section(section, admin=False):
    template = get_template(section.section_template_id)

    data = {
        "id": section.id,
        "section_template_id": section.section_template_id,
        "component_name": template.component_name.value if template else None,
        "order": section.order,
        "props": section.props or {},
    }

    if admin:
        data["page_id"] = section.page_id
        data["created_at"] = section.created_at.isoformat() if section.created_at else None
        data["updated_at"] = section.updated_at.isoformat() if section.updated_at else None

    return data
