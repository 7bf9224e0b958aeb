"""
Clinic bounded context: patients, doctors, appointments and prescriptions.
"""
