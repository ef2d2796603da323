from django.urls import path

from farms.views import cow_views, farm_views

app_name = "farms"

urlpatterns = [
    # Farms and paddocks
    path("fincas/", farm_views.farms, name="farms"),
    path("potreros/<int:farm_id>/", farm_views.farm_paddocks, name="farm-paddocks"),

    # Cows
    path("vacas/<int:paddock_id>/", cow_views.paddock_cows, name="paddock-cows"),
    path("vacas/nueva/<int:paddock_id>/", cow_views.register_cow, name="cow-register"),
    path("vacas/perfil/<int:cow_id>/", cow_views.cow_profile, name="cow-profile"),
    path("vacas/eliminar/<int:cow_id>/", cow_views.delete_cow, name="cow-delete"),

    # Alert anchors
    path("vacas/embarazo/<int:cow_id>/", cow_views.record_pregnancy, name="cow-pregnancy"),
    path("vacas/desparasitacion/<int:cow_id>/", cow_views.record_deworming, name="cow-deworming"),
]
