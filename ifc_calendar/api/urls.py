from django.urls import path

from . import views

urlpatterns = [
    path("to-ifc/", views.ToIfcView.as_view(), name="ifc-to-ifc"),
    path("to-iso/", views.ToIsoView.as_view(), name="ifc-to-iso"),
    path("step/", views.StepView.as_view(), name="ifc-step"),
]
