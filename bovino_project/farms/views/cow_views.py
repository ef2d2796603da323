# farms/views/cow_views.py

import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from bovino_project.http import InvalidJSONBody, form_errors, json_message, read_json
from farms.forms import CowForm, DewormingForm, PregnancyForm
from farms.models import Cow, Paddock

logger = logging.getLogger(__name__)


def serialize_cow(cow):
    return {
        "id": cow.pk,
        "codigo": cow.code,
        "edad": cow.age,
        "raza": cow.breed,
        "novedadesSanitarias": cow.health_notes,
        "vacunas": cow.vaccines,
        "potreroId": cow.paddock_id,
        "veterinarioId": cow.veterinarian_id,
        "fechaEmbarazo": cow.pregnancy_date.isoformat() if cow.pregnancy_date else None,
        "fechaDesparasitacion": cow.deworming_date.isoformat() if cow.deworming_date else None,
    }


@require_GET
def paddock_cows(request, paddock_id):
    paddock = Paddock.objects.filter(pk=paddock_id).first()
    if paddock is None:
        return json_message("Potrero no encontrado", status=404)

    cows = paddock.cows.order_by("code", "pk")
    return JsonResponse({"vacas": [serialize_cow(c) for c in cows]})


@csrf_exempt
@require_http_methods(["POST"])
def register_cow(request, paddock_id):
    paddock = Paddock.objects.filter(pk=paddock_id).first()
    if paddock is None:
        return json_message("Potrero no encontrado", status=404)

    try:
        form = CowForm(read_json(request))
    except InvalidJSONBody:
        return json_message("Cuerpo JSON inválido", status=400)

    if not form.is_valid():
        if form.has_error("veterinarioId", code="not_found"):
            return json_message("Veterinario no encontrado", status=404)
        return form_errors(form)

    data = form.cleaned_data
    cow = Cow.objects.create(
        paddock=paddock,
        code=data["codigo"],
        age=data.get("edad"),
        breed=data.get("raza", ""),
        health_notes=data.get("novedadesSanitarias", ""),
        vaccines=data.get("vacunas", ""),
        veterinarian=data.get("veterinarioId"),
        pregnancy_date=data.get("fechaEmbarazo"),
        deworming_date=data.get("fechaDesparasitacion"),
    )
    logger.info("Cow %s registered in paddock %s", cow.pk, paddock.pk)

    return JsonResponse(
        {"message": "Vaca registrada con éxito", "vaca": serialize_cow(cow)},
        status=201,
    )


@csrf_exempt
@require_http_methods(["DELETE"])
def delete_cow(request, cow_id):
    cow = Cow.objects.filter(pk=cow_id).first()
    if cow is None:
        return json_message("Vaca no encontrada", status=404)

    data = serialize_cow(cow)
    cow.delete()

    return JsonResponse({"message": "Vaca eliminada con éxito", "vaca": data})


@require_GET
def cow_profile(request, cow_id):
    cow = Cow.objects.filter(pk=cow_id).first()
    if cow is None:
        return json_message("Vaca no encontrada", status=404)
    return JsonResponse({"vaca": serialize_cow(cow)})


def _update_anchor(request, cow_id, form_class, field, model_field, label):
    try:
        form = form_class(read_json(request))
    except InvalidJSONBody:
        return json_message("Cuerpo JSON inválido", status=400)

    if not form.is_valid():
        return form_errors(form)

    updated = Cow.objects.filter(pk=cow_id).update(**{model_field: form.cleaned_data[field]})
    if not updated:
        return json_message("Vaca no encontrada", status=404)

    logger.info("Cow %s: %s set to %s", cow_id, model_field, form.cleaned_data[field])

    cow = Cow.objects.get(pk=cow_id)
    return JsonResponse({
        "message": f"{label} registrado correctamente",
        "vaca": serialize_cow(cow),
    })


@csrf_exempt
@require_http_methods(["PUT"])
def record_pregnancy(request, cow_id):
    return _update_anchor(
        request, cow_id, PregnancyForm,
        field="fechaEmbarazo",
        model_field="pregnancy_date",
        label="Embarazo",
    )


@csrf_exempt
@require_http_methods(["PUT"])
def record_deworming(request, cow_id):
    return _update_anchor(
        request, cow_id, DewormingForm,
        field="fechaDesparasitacion",
        model_field="deworming_date",
        label="Desparasitación",
    )
