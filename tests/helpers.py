from box_layout.css import Declaration, Rule, SimpleSelector, Stylesheet, parse_value


def make_rule(selectors, **declarations):
    """Build a rule; keyword names use underscores for dashes."""
    if isinstance(selectors, SimpleSelector):
        selectors = [selectors]
    return Rule(
        selectors,
        [Declaration(name.replace('_', '-'), parse_value(value)) for name, value in declarations.items()],
    )


def make_sheet(*rules):
    return Stylesheet(list(rules))
