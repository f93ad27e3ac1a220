"""
MedPortal - role-scoped clinical workflow core.

Patients book appointments, doctors write e-prescriptions (each one also
appends a medical record), pharmacists dispense, and an administrator
arbitrates appointment status. ``services.ClinicService`` is the entry point;
``main.create_app`` wraps it in a small Flask adapter.
"""

__version__ = "1.0.0"
