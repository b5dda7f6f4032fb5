"""URL routing for the administrator dashboard."""

from django.urls import path  # type: ignore

from apps.audit.views import AuditLogListView

from .views import PendingBookingListView, StatsView, SystemOverviewView, UserListView

urlpatterns = [
    path('stats/', StatsView.as_view(), name='admin-stats'),
    path('users/', UserListView.as_view(), name='admin-users'),
    path('bookings/pending/', PendingBookingListView.as_view(), name='admin-pending-bookings'),
    path('overview/', SystemOverviewView.as_view(), name='admin-overview'),
    path('logs/', AuditLogListView.as_view(), name='admin-logs'),
]
