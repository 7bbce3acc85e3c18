def print_filter_debug(definition, registry=None):
    """Print a summary of a parsed filter definition (and resolved actions, when a registry is given)."""
    entities = list(definition.entities.values())
    optionsets = list(definition.global_optionsets.values())
    actions = definition.actions

    print("=== SUMMARY ===")
    print(f"Entities: {len(entities)} | Global optionsets: {len(optionsets)} | Actions: {len(actions)}")
    flag = "on" if definition.suppress_mapped_standard_optionset_properties else "off"
    print(f"Suppress mapped standard optionset properties: {flag}\n")

    if entities:
        print("=== ENTITIES ===")
        for e in entities:
            print(f"- {e.service_name}: {e.logical_name}")
            if not e.optionsets:
                print("    (no optionsets)")
            for o in e.optionsets:
                if o.is_global:
                    print(f"    • {o.name} ({o.logical_name}) -> global {o.id}")
                else:
                    kind = "multi" if o.multi else "single"
                    print(f"    • {o.name} ({o.logical_name}) {kind}, {len(o.values)} value(s)")
        print()

    if optionsets:
        print("=== GLOBAL OPTIONSETS ===")
        for o in optionsets:
            values = ", ".join(f"{v.name}={v.value}" for v in o.values)
            print(f"- {o.name} [{o.id}]: {values}")
        print()

    if actions:
        print("=== ACTIONS ===")
        activities = registry.activities if registry is not None else {}
        for a in actions:
            activity = activities.get(a.name)
            if registry is None:
                print(f"- {a.name}: {a.logical_name}")
            elif activity is None:
                print(f"- {a.name}: {a.logical_name} (unresolved)")
            else:
                target = activity.logical_name or "unbound"
                print(f"- {a.name}: {a.logical_name} target={target}")
                for m in activity.input_members:
                    print(f"    • in  {m.name}: {m.type_name}")
                for m in activity.output_members:
                    req = " (required)" if m.required else ""
                    print(f"    • out {m.name}: {m.type_name}{req}")
        print()
