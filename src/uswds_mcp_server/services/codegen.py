"""React-USWDS code generation for single components and simple forms."""

from __future__ import annotations

from typing import Any

from uswds_mcp_server.data.components import REACT_COMPONENTS
from uswds_mcp_server.framework import FrameworkAwareService, FrameworkMode

REACT_USWDS_PACKAGE = "@trussworks/react-uswds"

# Inputs rendered self-closing next to a <Label>.
LABELLED_INPUTS = frozenset(
    {"TextInput", "Select", "Checkbox", "Radio", "FileInput", "DatePicker"}
)
# Components whose generated import also pulls in Label.
FORM_INPUTS = LABELLED_INPUTS | {"Textarea", "TimePicker"}

_CONTENT_KEYS = ("children", "label", "text")

FIELD_COMPONENTS: dict[str, str] = {
    "text": "TextInput",
    "email": "TextInput",
    "password": "TextInput",
    "tel": "TextInput",
    "number": "TextInput",
    "textarea": "Textarea",
    "select": "Select",
    "dropdown": "Select",
    "checkbox": "Checkbox",
    "radio": "Radio",
    "date": "DatePicker",
    "file": "FileInput",
}


def _indent(text: str, spaces: int) -> str:
    pad = " " * spaces
    return "\n".join(pad + line if line else line for line in text.splitlines())


def build_props(component: dict[str, Any], requirements: dict[str, Any]) -> str:
    """Render the requirements that match declared props as JSX attributes."""
    declared = {prop["name"] for prop in component["props"]}
    parts: list[str] = []
    for key, value in requirements.items():
        if key in _CONTENT_KEYS or key not in declared:
            continue
        if isinstance(value, bool):
            if value:
                parts.append(key)
        elif isinstance(value, str):
            parts.append(f'{key}="{value}"')
        elif isinstance(value, (int, float)):
            parts.append(f"{key}={{{value}}}")
    return "".join(f"\n      {part}" for part in parts)


def build_imports(name: str, requirements: dict[str, Any]) -> str:
    """Import line for a generated component."""
    names = [name]
    if name in FORM_INPUTS:
        names.append("Label")
    if requirements.get("useFormGroup"):
        names.append("FormGroup")
    return f"import {{ {', '.join(names)} }} from '{REACT_USWDS_PACKAGE}'"


def build_component_code(
    name: str, component: dict[str, Any], requirements: dict[str, Any]
) -> str:
    """JSX for ``name``; falls back to the first documented example."""
    if not requirements:
        if component["examples"]:
            return component["examples"][0]["code"]
        requirements = {"children": f"{name} content"}

    props = build_props(component, requirements)
    if name in LABELLED_INPUTS:
        input_id = requirements.get("id", "input-id")
        label = requirements.get("label", "Label")
        return (
            f"import {{ {name}, Label }} from '{REACT_USWDS_PACKAGE}'\n\n"
            "export default function Example() {\n"
            "  return (\n"
            "    <div>\n"
            f'      <Label htmlFor="{input_id}">{label}</Label>\n'
            f"      <{name}{props} />\n"
            "    </div>\n"
            "  )\n"
            "}"
        )

    children = next(
        (requirements[key] for key in _CONTENT_KEYS if requirements.get(key)),
        f"{name} Content",
    )
    return (
        f"import {{ {name} }} from '{REACT_USWDS_PACKAGE}'\n\n"
        "export default function Example() {\n"
        "  return (\n"
        f"    <{name}{props}>\n"
        f"      {children}\n"
        f"    </{name}>\n"
        "  )\n"
        "}"
    )


def _field_code(field: dict[str, Any], validate: bool) -> str:
    name = field["name"]
    label = field.get("label", name)
    field_type = field.get("type", "text")
    required = bool(field.get("required", False))
    placeholder = field.get("placeholder", "")
    tracked = validate and required

    error_attr = f" error={{!!errors.{name}}}" if tracked else ""
    marker = " *" if required else ""

    if field_type == "checkbox":
        lines = [f'id="{name}"', f'name="{name}"', f'label="{label}"']
        if required:
            lines.append("required")
        if validate:
            lines.append(f"checked={{formData.{name} || false}}")
            lines.append(
                "onChange={(e) => setFormData(prev => "
                f"({{ ...prev, {name}: e.target.checked }}))}}"
            )
        attrs = _indent("\n".join(lines), 2)
        return f"<FormGroup>\n  <Checkbox\n{attrs}\n  />\n</FormGroup>"

    component = FIELD_COMPONENTS.get(field_type, "TextInput")
    lines = [f'id="{name}"', f'name="{name}"']
    if required:
        lines.append("required")
    if validate:
        lines.append(f"value={{formData.{name} || ''}}")
        lines.append("onChange={handleChange}")
    if placeholder:
        lines.append(f'placeholder="{placeholder}"')
    if tracked:
        lines.append(f"validationStatus={{errors.{name} ? 'error' : undefined}}")
    if component == "TextInput":
        lines.append(f'type="{field_type}"')

    body = [f'<Label htmlFor="{name}"{error_attr}>{label}{marker}</Label>']
    if tracked:
        body.append(
            f"{{errors.{name} && "
            f'<span className="usa-error-message">{{errors.{name}}}</span>}}'
        )
    attrs = _indent("\n".join(lines), 2)
    if component == "Select":
        options = ['<option value="">- Select -</option>']
        for option in field.get("options", []):
            if isinstance(option, dict):
                options.append(
                    f'<option value="{option.get("value", "")}">'
                    f'{option.get("label", "")}</option>'
                )
            else:
                options.append(f'<option value="{option}">{option}</option>')
        body.append(
            f"<Select\n{attrs}\n>\n{_indent(chr(10).join(options), 2)}\n</Select>"
        )
    else:
        body.append(f"<{component}\n{attrs}\n/>")

    return f"<FormGroup{error_attr}>\n{_indent(chr(10).join(body), 2)}\n</FormGroup>"


def form_imports(fields: list[dict[str, Any]]) -> str:
    """Import line covering every component a form uses."""
    names = {"Form", "FormGroup", "Label", "Button"}
    for field in fields:
        component = FIELD_COMPONENTS.get(field.get("type", "text"))
        if component:
            names.add(component)
    return f"import {{ {', '.join(sorted(names))} }} from '{REACT_USWDS_PACKAGE}'"


def build_form_code(
    form_name: str,
    fields: list[dict[str, Any]],
    submit_label: str,
    validate: bool,
) -> str:
    """Full React component source for a form."""
    field_code = "\n\n".join(_field_code(field, validate) for field in fields)
    lines = [form_imports(fields)]
    if validate:
        lines.append("import { useState } from 'react'")
    lines += ["", f"export default function {form_name}() {{"]

    if validate:
        checks = [
            f"    if (!formData.{field['name']}) newErrors.{field['name']} = "
            f"'{field.get('label', field['name'])} is required'"
            for field in fields
            if field.get("required")
        ]
        lines += [
            "  const [formData, setFormData] = useState({})",
            "  const [errors, setErrors] = useState({})",
            "",
            "  const handleChange = (e) => {",
            "    const { name, value } = e.target",
            "    setFormData(prev => ({ ...prev, [name]: value }))",
            "    if (errors[name]) {",
            "      setErrors(prev => ({ ...prev, [name]: '' }))",
            "    }",
            "  }",
            "",
            "  const validate = () => {",
            "    const newErrors = {}",
            *checks,
            "    return newErrors",
            "  }",
            "",
        ]

    lines += ["  const handleSubmit = (event) => {", "    event.preventDefault()"]
    if validate:
        lines += [
            "    const newErrors = validate()",
            "    if (Object.keys(newErrors).length > 0) {",
            "      setErrors(newErrors)",
            "      return",
            "    }",
        ]
    lines += [
        "    // Handle form submission here",
        "    console.log('Form submitted'" + (", formData)" if validate else ")"),
        "  }",
        "",
        "  return (",
        "    <Form onSubmit={handleSubmit} large>",
        _indent(field_code, 6),
        "",
        f'      <Button type="submit">{submit_label}</Button>',
        "    </Form>",
        "  )",
        "}",
    ]
    return "\n".join(lines)


class CodeGeneratorService(FrameworkAwareService):
    """Generate React-USWDS snippets; other frameworks get guidance instead."""

    def _unavailable(self, mode: FrameworkMode, what: str) -> dict[str, Any]:
        if mode == "tailwind":
            return {
                "mode": "tailwind-uswds",
                "message": (
                    f"{what} is not yet available for Tailwind USWDS. Use "
                    "get_tailwind_uswds_component to copy markup from the "
                    "documentation."
                ),
            }
        return {
            "error": f"{what} is only available in React mode",
            "mode": "vanilla-uswds",
            "message": "Set USE_REACT_COMPONENTS=true to generate React code",
        }

    async def generate_component(
        self,
        component_name: str,
        requirements: dict[str, Any] | None = None,
        framework: str | None = None,
    ) -> dict[str, Any]:
        """Generate JSX for one component.

        Args:
            component_name: React-USWDS component name, e.g. ``"Button"``.
            requirements: Prop values plus optional ``children``/``label``/``text``
                content and ``useFormGroup``.
            framework: ``react``, ``vanilla`` (alias ``html``) or ``tailwind``.
        """
        mode = self.resolve("vanilla" if framework == "html" else framework)
        if mode != "react":
            return self._unavailable(mode, "Code generation")

        component = REACT_COMPONENTS.get(component_name)
        if component is None:
            return {
                "error": f'Component "{component_name}" not found',
                "message": "Check the component name spelling",
                "hint": "Use list_components to see available components",
            }

        options = dict(requirements or {})
        return {
            "component": component_name,
            "description": component["description"],
            "generatedCode": build_component_code(component_name, component, options),
            "requirements": options,
            "imports": build_imports(component_name, options),
            "usage": "Copy this code into your React component file",
            "nextSteps": [
                "Copy the code to your project",
                "Adjust props as needed",
                "Add event handlers for interactive elements",
                "Test accessibility with screen readers",
            ],
            "documentation": component["url"],
        }

    async def generate_form(
        self, form: dict[str, Any], framework: str | None = None
    ) -> dict[str, Any]:
        """Generate a form component from a field specification.

        ``form`` takes ``formName``, ``fields`` (each with ``name``, ``label``,
        ``type``, ``required``, ``placeholder``, ``options``), ``submitLabel``
        and ``includeValidation``.
        """
        mode = self.resolve("vanilla" if framework == "html" else framework)
        if mode != "react":
            return self._unavailable(mode, "Form generation")

        fields = list(form.get("fields") or [])
        if not fields:
            return {
                "error": "No fields specified",
                "message": "Provide an array of field specifications",
                "example": {
                    "formName": "ContactForm",
                    "fields": [
                        {"name": "name", "label": "Full Name", "type": "text"},
                        {"name": "email", "label": "Email", "type": "email"},
                        {"name": "message", "label": "Message", "type": "textarea"},
                    ],
                    "submitLabel": "Send Message",
                },
            }

        form_name = form.get("formName", "MyForm")
        validate = bool(form.get("includeValidation", True))
        return {
            "formName": form_name,
            "fieldCount": len(fields),
            "imports": form_imports(fields),
            "code": build_form_code(
                form_name, fields, form.get("submitLabel", "Submit"), validate
            ),
            "features": {
                "validation": validate,
                "accessibility": True,
                "responsive": True,
            },
            "usage": "Copy this code into your React component file",
            "nextSteps": [
                "Customize the handleSubmit function",
                "Add form validation logic",
                "Style with additional CSS if needed",
                "Test with keyboard navigation",
            ],
        }
