# Presentation Layer
