# Static vehicle problem vocabulary used by the keyword matcher.
# Loaded once at import and never mutated (tuples / read-only mappings).

from types import MappingProxyType


VEHICLE_KEYWORDS = (

    # --------------------------------------------------
    # BRAKES
    # --------------------------------------------------
    "brake pedal", "brake pads", "brake discs", "brake fluid", "brake lines",
    "brake noise", "brake vibration", "brake failure", "brake warning",
    "brake squeal", "parking brake", "abs light",

    # --------------------------------------------------
    # ENGINE
    # --------------------------------------------------
    "engine overheating", "engine noise", "engine failure", "engine stalling",
    "engine misfire", "engine vibration", "engine smoking", "engine knocking",
    "engine rattle", "motor starter", "motor mount", "spark plug", "timing belt",

    # --------------------------------------------------
    # ELECTRICAL
    # --------------------------------------------------
    "battery dead", "battery drain", "alternator failure", "starter motor",
    "electrical short", "fuse blown", "wiring issue", "light failure",
    "electrical problem", "fuse box", "headlight out", "dashboard lights",

    # --------------------------------------------------
    # TIRES & WHEELS
    # --------------------------------------------------
    "flat tire", "tire pressure", "tire wear", "wheel alignment", "wheel bearing",
    "rim damage", "tire vibration", "tire puncture", "wheel wobble",

    # --------------------------------------------------
    # SUSPENSION
    # --------------------------------------------------
    "suspension noise", "suspension failure", "shock absorbers", "strut failure",
    "spring broken", "control arm", "ball joint", "bushing worn",
    "suspension sagging", "shock leaking",

    # --------------------------------------------------
    # STEERING & RIDE
    # --------------------------------------------------
    "steering wheel", "power steering", "steering vibration", "alignment issue",
    "car pulling", "uneven ride", "body roll", "steering noise",

    # --------------------------------------------------
    # TRANSMISSION
    # --------------------------------------------------
    "transmission slipping", "gear shifting", "clutch problem", "transmission fluid",
    "gear noise", "shifting difficulty", "clutch slipping", "gear grinding",
    "transmission leak",

    # --------------------------------------------------
    # COOLING
    # --------------------------------------------------
    "coolant leak", "overheating issue", "radiator problem", "thermostat failure",
    "water pump", "cooling fan", "temperature gauge",

    # --------------------------------------------------
    # EXHAUST & FUEL
    # --------------------------------------------------
    "exhaust leak", "muffler problem", "catalytic converter", "exhaust noise",
    "exhaust smoke", "fuel pump", "fuel injector", "fuel filter", "fuel leak",

    # --------------------------------------------------
    # BODY & INTERIOR
    # --------------------------------------------------
    "side mirror", "windshield crack", "door lock", "window regulator",
    "seat belt", "air conditioning", "heater problem", "door hinge",

    # --------------------------------------------------
    # GENERAL SYMPTOMS
    # --------------------------------------------------
    "oil leak", "power loss", "check engine", "warning light", "emission problem",
    "burning smell", "strange smell",
)


# Category -> substrings of a matched keyword that imply it.
# Insertion order is the order categories are tested for each keyword.
CATEGORY_RULES = MappingProxyType({
    "brake": ("brake",),
    "tire": ("tire", "wheel"),
    "engine": ("engine", "motor"),
    "electrical": ("electrical", "battery", "light", "fuse"),
    "transmission": ("transmission", "gear", "clutch"),
    "suspension": ("suspension", "shock", "strut"),
})


# Category -> (escalation substrings, escalated severity, default severity)
SEVERITY_RULES = MappingProxyType({
    "brake": (("noise", "failure"), "high", "medium"),
    "engine": (("failure", "overheating"), "high", "medium"),
    "tire": (("flat", "wear"), "medium", "low"),
    "electrical": (("battery", "failure"), "medium", "low"),
    "transmission": (("slipping", "failure"), "high", "medium"),
    "suspension": (("failure", "broken"), "high", "medium"),
})


CATEGORY_MESSAGES = MappingProxyType({
    "brake": {
        "mainProblem": "Brake system issue detected",
        "recommendation": (
            "Have the brake pads, discs and brake fluid inspected by a mechanic "
            "as soon as possible. Avoid hard or high-speed braking until then."
        ),
    },
    "tire": {
        "mainProblem": "Tire or wheel issue detected",
        "recommendation": (
            "Check tire pressure and tread depth, and have wheel alignment "
            "and balancing checked at a tire shop."
        ),
    },
    "engine": {
        "mainProblem": "Engine performance issue detected",
        "recommendation": (
            "Have the engine scanned for fault codes and inspected. "
            "Stop driving if the engine overheats or the check engine light flashes."
        ),
    },
    "electrical": {
        "mainProblem": "Electrical system issue detected",
        "recommendation": (
            "Test the battery and charging system, then inspect fuses and wiring "
            "for the affected circuit."
        ),
    },
    "transmission": {
        "mainProblem": "Transmission or clutch issue detected",
        "recommendation": (
            "Check the transmission fluid level and condition and have the clutch "
            "and gearbox inspected by a transmission specialist."
        ),
    },
    "suspension": {
        "mainProblem": "Suspension issue detected",
        "recommendation": (
            "Have the shocks, struts, springs and suspension joints inspected "
            "for wear or damage."
        ),
    },
    "other": {
        "mainProblem": "General vehicle maintenance check recommended",
        "recommendation": (
            "No specific problem could be identified from the recording. "
            "Schedule a general inspection with a qualified mechanic."
        ),
    },
})

NO_ISSUES_PLACEHOLDER = "No specific issues identified from the description"
MAX_SPECIFIC_ISSUES = 5
