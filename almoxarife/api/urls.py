from django.urls import path

from almoxarife.api.views import (
    EntryNewItemView,
    EntryView,
    ExitView,
    MovementListView,
    SummaryView,
)

app_name = 'almoxarife'

urlpatterns = [
    path('stock/entry/', EntryView.as_view(), name='stock-entry'),
    path('stock/entry/new/', EntryNewItemView.as_view(), name='stock-entry-new'),
    path('stock/exit/', ExitView.as_view(), name='stock-exit'),
    path('stock/movements/', MovementListView.as_view(), name='stock-movements'),
    path('stock/summary/', SummaryView.as_view(), name='stock-summary'),
]
