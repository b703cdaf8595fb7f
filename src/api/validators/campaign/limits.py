"""Limites de validação para requisições de campanha."""

import re

# Telefone em formato internacional, com ou sem "+"
PHONE_PATTERN = re.compile(r"^\+?[0-9]{10,15}$")

MAX_RECIPIENTS_PER_CAMPAIGN = 1000
