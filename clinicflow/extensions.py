from clinicflow.services.store import ClinicStore

# Shared record store, loaded with seed data by create_app()
store = ClinicStore()
