from django.conf import settings

SESSION_KEY = getattr(settings, "IFC_SESSION_KEY", "ifc_current_date")
ACCEPT_DMY = getattr(settings, "IFC_ACCEPT_DMY", True)
