from django.contrib import admin

from enrollments.models import Enrollment, Ticket, TicketType


class TicketInline(admin.TabularInline):
    model = Ticket
    extra = 0


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):
    list_display = ["name", "user", "cpf", "created_at"]
    search_fields = ["name", "cpf"]
    inlines = [TicketInline]


@admin.register(TicketType)
class TicketTypeAdmin(admin.ModelAdmin):
    list_display = ["name", "price", "is_remote", "includes_hotel"]
    list_filter = ["is_remote", "includes_hotel"]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["enrollment", "ticket_type", "status", "created_at"]
    list_filter = ["status", "ticket_type"]
