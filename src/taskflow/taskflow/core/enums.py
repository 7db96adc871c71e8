from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles known to the permission matrix."""

    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class EntryStatus(str, Enum):
    """Clock state of a time entry, as stored by the resource API."""

    CLOCKED_IN = "clocked-in"
    ON_BREAK = "on-break"
    CLOCKED_OUT = "clocked-out"


class ModuleKey(str, Enum):
    """Dashboard modules that can be toggled per role."""

    DASHBOARD = "dashboard"
    USERS = "users"
    ROLES = "roles"
    TASKS = "tasks"
    EMPLOYEES = "employees"
    APPLIANCES = "appliances"
    VEHICLES = "vehicles"
    LOCATIONS = "locations"
    SCHEDULING = "scheduling"
    TIME_TRACKING = "time_tracking"
    MESSAGING = "messaging"
    DO_NOT_HIRE = "do_not_hire"
    ONBOARDING = "onboarding"
    REPORTS = "reports"
    SETTINGS = "settings"


DASHBOARD_ROLES = (Role.ADMIN, Role.MANAGER)

MODULE_LABELS: dict[ModuleKey, str] = {
    ModuleKey.DASHBOARD: "Dashboard",
    ModuleKey.USERS: "User Management",
    ModuleKey.ROLES: "Roles & Permissions",
    ModuleKey.TASKS: "Tasks",
    ModuleKey.EMPLOYEES: "Employees",
    ModuleKey.APPLIANCES: "Appliances",
    ModuleKey.VEHICLES: "Vehicles",
    ModuleKey.LOCATIONS: "Locations",
    ModuleKey.SCHEDULING: "Scheduling",
    ModuleKey.TIME_TRACKING: "Time Tracking",
    ModuleKey.MESSAGING: "Messaging",
    ModuleKey.DO_NOT_HIRE: "Do Not Hire",
    ModuleKey.ONBOARDING: "Onboarding",
    ModuleKey.REPORTS: "Reports",
    ModuleKey.SETTINGS: "Settings",
}
