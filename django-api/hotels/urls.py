from django.urls import re_path

from hotels.handlers import HotelDetailView, HotelListView

# A trailing slash is optional, so "/hotels/" routes like "/hotels".
urlpatterns = [
    re_path(r"^hotels/?$", HotelListView.as_view(), name="hotel-list"),
    re_path(
        r"^hotels/(?P<hotel_id>[^/]+)/?$",
        HotelDetailView.as_view(),
        name="hotel-detail",
    ),
]
