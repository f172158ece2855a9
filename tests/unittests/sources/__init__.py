# This file is part of ds-identify. See LICENSE file for license information.
