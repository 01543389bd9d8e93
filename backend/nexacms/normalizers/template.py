def normalize_template(template, include_defaults=True):
    data = {
        "id": template.id,
        "name": template.name,
        "category": template.category,
        "component_name": template.component_name.value,
        "description": template.description,
        "icon": template.icon,
        "tags": sorted(template.tags),
        "is_active": template.is_active,
        "version": template.version,
        "variant": template.variant,
    }

    if include_defaults:
        data["default_props"] = template.default_props

    return data
