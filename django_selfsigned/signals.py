from django.dispatch import Signal

# sender is GenerateOptions class, options=GenerateOptions instance
pre_generate = Signal()
certificate_generated = Signal()  # options=..., result=KeyAndCert
