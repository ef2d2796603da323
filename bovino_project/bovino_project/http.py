import json

from django.http import JsonResponse


class InvalidJSONBody(ValueError):
    pass


def read_json(request):
    """Decode a JSON object request body; empty bodies decode to ``{}``."""
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidJSONBody(str(exc)) from exc
    if not isinstance(data, dict):
        raise InvalidJSONBody("Se esperaba un objeto JSON")
    return data


def json_message(message, status=200, **extra):
    return JsonResponse({"message": message, **extra}, status=status)


def form_errors(form, status=400):
    return JsonResponse(
        {"message": "Datos inválidos", "errors": form.errors.get_json_data()},
        status=status,
    )
