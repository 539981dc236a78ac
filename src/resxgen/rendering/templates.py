from textwrap import dedent

AUTO_GENERATED_HEADER = dedent(
    """
    // ------------------------------------------------------------------------------
    // <auto-generated>
    //     This code was generated by a tool.
    //
    //     Changes to this file may cause incorrect behavior and will be lost if
    //     the code is regenerated.
    // </auto-generated>
    // ------------------------------------------------------------------------------
    """,
).strip()

NULLABLE_ENABLE_DIRECTIVE = "#nullable enable"

UNIT_TEMPLATE = dedent(
    """
    {header_block}

    {namespace_block}
    """,
).strip()

NAMESPACE_TEMPLATE = dedent(
    """
    namespace {name}
    {{
    {body_block}
    }}
    """,
).strip()

CLASS_TEMPLATE = dedent(
    """
    {modifiers} class {name}
    {{
    {body_block}
    }}
    """,
).strip()

USING_TEMPLATE = "using {name};"

FIELD_TEMPLATE = "{modifiers} {type_name} {name};"

EXPRESSION_PROPERTY_TEMPLATE = "{modifiers} {type_name} {name} => {expression};"

AUTO_PROPERTY_TEMPLATE = "{modifiers} {type_name} {name} {{ {accessors_block} }}"

DOC_COMMENT_MARKER = "///"
