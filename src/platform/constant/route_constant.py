# API Route Constants

# Booking routes
BOOKING_BASE = '/booking'
BOOKING_GET = BOOKING_BASE
BOOKING_CREATE = BOOKING_BASE
BOOKING_UPDATE = f'{BOOKING_BASE}/{{booking_id}}'

# Platform routes
HEALTH = '/health'
METRICS = '/metrics'
