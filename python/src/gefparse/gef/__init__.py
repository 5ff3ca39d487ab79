# Copyright (C) 2026 Darkmine Pty Ltd
# SPDX-License-Identifier: GPL-3.0-or-later

from . import axes, bore, cpt, depth, detect, headers, metadata, model, parse, tokenizer, validate

__all__ = [
	"axes",
	"bore",
	"cpt",
	"depth",
	"detect",
	"headers",
	"metadata",
	"model",
	"parse",
	"tokenizer",
	"validate",
]
