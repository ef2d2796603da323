# farms/views/farm_views.py
#
# Farms and their paddocks. Every alert recipient is resolved through
# Farm.owner, so a farm is always created for an existing user.

import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from bovino_project.http import InvalidJSONBody, form_errors, json_message, read_json
from farms.forms import FarmForm, PaddockForm
from farms.models import Farm, Paddock

logger = logging.getLogger(__name__)


def serialize_paddock(paddock):
    return {
        "id": paddock.pk,
        "nombre": paddock.name,
        "fincaId": paddock.farm_id,
    }


def serialize_farm(farm):
    return {
        "id": farm.pk,
        "nombre": farm.name,
        "ubicacion": farm.location,
        "usuarioId": farm.owner_id,
        "potreros": [serialize_paddock(p) for p in farm.paddocks.all()],
    }


@csrf_exempt
@require_http_methods(["GET", "POST"])
def farms(request):
    if request.method == "GET":
        owner_id = request.GET.get("usuarioId")
        if not owner_id or not owner_id.isdigit():
            return json_message("usuarioId no proporcionado", status=400)

        qs = (
            Farm.objects
            .filter(owner_id=int(owner_id))
            .prefetch_related("paddocks")
            .order_by("name", "pk")
        )
        return JsonResponse({
            "message": "Fincas obtenidas con éxito",
            "fincas": [serialize_farm(f) for f in qs],
        })

    try:
        form = FarmForm(read_json(request))
    except InvalidJSONBody:
        return json_message("Cuerpo JSON inválido", status=400)

    if not form.is_valid():
        if form.has_error("usuarioId", code="not_found"):
            return json_message("Usuario no encontrado", status=404)
        return form_errors(form)

    farm = Farm.objects.create(
        name=form.cleaned_data["nombre"],
        location=form.cleaned_data.get("ubicacion", ""),
        owner=form.cleaned_data["usuarioId"],
    )
    logger.info("Farm %s registered for user %s", farm.pk, farm.owner_id)

    return JsonResponse(
        {"message": "Finca registrada con éxito", "finca": serialize_farm(farm)},
        status=201,
    )


@csrf_exempt
@require_http_methods(["GET", "POST"])
def farm_paddocks(request, farm_id):
    farm = Farm.objects.filter(pk=farm_id).first()
    if farm is None:
        return json_message("Finca no encontrada", status=404)

    if request.method == "GET":
        return JsonResponse({
            "message": "Potreros obtenidos con éxito",
            "potreros": [serialize_paddock(p) for p in farm.paddocks.order_by("name", "pk")],
        })

    try:
        form = PaddockForm(read_json(request))
    except InvalidJSONBody:
        return json_message("Cuerpo JSON inválido", status=400)

    if not form.is_valid():
        return form_errors(form)

    paddock = Paddock.objects.create(name=form.cleaned_data["nombre"], farm=farm)

    return JsonResponse(
        {"message": "Potrero registrado con éxito", "potrero": serialize_paddock(paddock)},
        status=201,
    )
