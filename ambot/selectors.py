# ambot/selectors.py
"""CSS selectors for the Airline Manager 4 web client.

Selectors starting with ``tr >`` or ``div.row`` are meant to be resolved
inside a row handle (``scope=``), the rest against the whole document.
"""

# Login screen
BUTTON_PLAY_NOW = "button.play-now"
BUTTON_LOGIN = "button[onclick=\"login('show');\"]"
TEXT_FIELD_LOGIN = "input#lEmail"
TEXT_FIELD_PASSWORD = "input#lPass"
BUTTON_AUTH = "button#btnLogin"
OVERLAY_LOADING = "div.preloader.exo.xl-text"

# Main screen
BUTTON_MAIN_HUBS = "button[onclick=\"popup('hubs.php','Hubs');\"]"
BUTTON_MAIN_ACCOUNT = "li.text-center[onclick=\"popup('banking.php','Banking');\"]"
BUTTON_MAIN_COMPANY = "div#smallMainMenu div#mapAcList"
BUTTON_MAIN_FLEET = "div#smallMainMenu div#mapRoutes"
BUTTON_MAIN_FUEL = "div#smallMainMenu div#mapMaint[data-original-title=\"Fuel & co2\"]"
BUTTON_MAIN_MAINTENANCE = "div#smallMainMenu div#mapMaint[data-original-title=\"Maintenance\"]"
BUTTON_MAIN_FINANCE = "div#smallMainMenu div#mapMaint[data-original-title=\"Finance, Marketing & Stock\"]"
BUTTON_MAIN_BONUS = "div#smallMainMenu div#mapMaint[data-original-title=\"Bonus & Increase\"]"
ICON_FREE_REWARDS = "div#smallMainMenu img#bonusDutyFreeIconAlert"

# Banking pop-up
LIST_ACCOUNT_ACCOUNTS = "div#bankingAction > table > tbody > tr"
TEXT_ACCOUNT_ACCOUNT_NAME = "tr > td:nth-child(1)"
TEXT_ACCOUNT_ACCOUNT_BALANCE = "tr > td:nth-child(2)"

# Pop-up tabs
BUTTON_COMMON_TAB1 = "#popBtn1"
BUTTON_COMMON_TAB2 = "#popBtn2"
BUTTON_COMMON_TAB3 = "#popBtn3"
BUTTON_COMMON_CLOSE_POPUP = "span[onclick=\"closePop();\"]"

# Flight info (left side of the main screen)
ICON_FI_LOUNGE_ALERT = "div#flightInfo span#loungeAlertIcon"
BUTTON_ALLIANCE_INFO = "div#flightInfo span[onclick=\"popup('alliance.php','Alliance');\"]"
BUTTON_FI_OVERVIEW = "div#flightInfo div#flightInfoSecContainer button[onclick=\"popup('overview.php','Overview');\"]"
BUTTON_FI_DEPART_ALL = "div#flightInfo button.btn-xs:nth-child(2)"
TEXT_FI_DEPART_AMOUNT = "div#flightInfo span#listDepartAmount"

# Overview pop-up
_OVERVIEW_LEFT = "div#popup div#popContent div.col-sm-6:nth-child(7) > table:nth-child(1) > tbody:nth-child(1)"
_OVERVIEW_RIGHT = "div#popup div#popContent div.col-sm-6:nth-child(8) > table:nth-child(1) > tbody:nth-child(1)"
TEXT_OVERVIEW_AIRLINE_REPUTATION = "div#popup div#popContent div.col-6:nth-child(4)"
TEXT_OVERVIEW_CARGO_REPUTATION = "div#popup div#popContent div.col-6:nth-child(5)"
TEXT_OVERVIEW_FLEET_SIZE = f"{_OVERVIEW_LEFT} > tr:nth-child(3) > td:nth-child(2)"
TEXT_OVERVIEW_AC_PENDING_DELIVERY = f"{_OVERVIEW_LEFT} > tr:nth-child(4) > td:nth-child(2)"
TEXT_OVERVIEW_ROUTES = f"{_OVERVIEW_LEFT} > tr:nth-child(5) > td:nth-child(2)"
TEXT_OVERVIEW_HUBS = f"{_OVERVIEW_LEFT} > tr:nth-child(6) > td:nth-child(2)"
TEXT_OVERVIEW_AC_PENDING_MAINTENANCE = f"{_OVERVIEW_LEFT} > tr:nth-child(7) > td:nth-child(2)"
TEXT_OVERVIEW_HANGAR_CAPACITY = f"{_OVERVIEW_LEFT} > tr:nth-child(9) > td:nth-child(2)"
TEXT_OVERVIEW_AC_INFLIGHT = f"{_OVERVIEW_RIGHT} > tr:nth-child(2) > td:nth-child(2)"
TEXT_OVERVIEW_SHARE_PRICE = f"{_OVERVIEW_RIGHT} > tr:nth-child(3) > td:nth-child(2)"
TEXT_OVERVIEW_FLIGHTS_OPERATED = f"{_OVERVIEW_RIGHT} > tr:nth-child(4) > td:nth-child(2)"
TEXT_OVERVIEW_PASSENGERS_ECONOMY = f"{_OVERVIEW_RIGHT} > tr:nth-child(5) > td:nth-child(2)"
TEXT_OVERVIEW_PASSENGERS_BUSINESS = f"{_OVERVIEW_RIGHT} > tr:nth-child(6) > td:nth-child(2)"
TEXT_OVERVIEW_PASSENGERS_FIRST = f"{_OVERVIEW_RIGHT} > tr:nth-child(7) > td:nth-child(2)"
TEXT_OVERVIEW_CARGO_LARGE = f"{_OVERVIEW_RIGHT} > tr:nth-child(8) > td:nth-child(2)"
TEXT_OVERVIEW_CARGO_HEAVY = f"{_OVERVIEW_RIGHT} > tr:nth-child(9) > td:nth-child(2)"

# Alliance pop-up
LIST_ALLIANCE_MEMBERS = "div#popup div#popContent div#member-container div#member-container-box > table > tbody > tr"
ATTR_ALLIANCE_MEMBER_ID = "id"
ALLIANCE_MEMBER_ID_PREFIX = "al-list-"
TEXT_ALLIANCE_MEMBER_NAME = "tr > td:nth-child(1) > a"
TEXT_ALLIANCE_MEMBER_SHARE_PRICE = "tr > td:nth-child(2)"
TEXT_ALLIANCE_MEMBER_CONTRIBUTED_TOTAL = "tr > td:nth-child(3)"
TEXT_ALLIANCE_MEMBER_CONTRIBUTED_PER_DAY = "tr > td:nth-child(4)"
TEXT_ALLIANCE_MEMBER_FLIGHTS = "tr > td:nth-child(6)"
TEXT_ALLIANCE_MEMBER_SEASON_MONEY = "tr > td:nth-child(8)"
_ALLIANCE_TOTALS = "div#popup div#popContent div#member-container tr.td-sort.bg-light"
TEXT_ALLIANCE_CONTRIBUTED_TOTAL = f"{_ALLIANCE_TOTALS} > td:nth-child(3)"
TEXT_ALLIANCE_CONTRIBUTED_PER_DAY = f"{_ALLIANCE_TOTALS} > td:nth-child(4)"
TEXT_ALLIANCE_FLIGHTS = f"{_ALLIANCE_TOTALS} > td:nth-child(6)"
TEXT_ALLIANCE_SEASON_MONEY = f"{_ALLIANCE_TOTALS} > td:nth-child(8)"

# Hubs pop-up
BUTTON_HUBS_LOUNGES_MAINTENANCE = "div#popContent button#loungeBtn"
LIST_HUBS_LOUNGES = "div#popContent table.table.table-sm.m-text > tbody > tr"
TEXT_HUBS_LOUNGES_LOUNGE_NAME = "tr > td:nth-child(1)"
TEXT_HUBS_LOUNGES_LOUNGE_WEAR_PERCENT = "tr > td:nth-child(2) > b:nth-child(1)"
TEXT_HUBS_LOUNGES_LOUNGE_REPAIR_COST = "tr > td:nth-child(2) > span:nth-child(3)"
BUTTON_HUBS_LOUNGES_LOUNGE_REPAIR = "tr > td:nth-child(3) > button:nth-child(1)"
BUTTON_HUBS_LOUNGES_BACK_TO_HUBS = "div#popContent button[onclick=\"popup('hubs.php','Hubs');\"]"
LIST_HUBS_HUBS = "div#hubList > div.row.mt-1.opa.rounded"
ELEMENT_HUB = "div.row.mt-1.opa.rounded > div:nth-child(3) > div:nth-child(1)"
TEXT_HUBS_HUB_NAME = "div.p-2.col-9.exo.m-text > b"
TEXT_HUBS_HUB_DEPARTURES = "div.row.mt-1.opa.rounded > div:nth-child(3) > div:nth-child(1) > div:nth-child(1) > span:nth-child(3)"
TEXT_HUBS_HUB_ARRIVALS = "div.row.mt-1.opa.rounded > div:nth-child(3) > div:nth-child(1) > div:nth-child(2) > span:nth-child(3)"
TEXT_HUBS_HUB_PAX_DEPARTED = "div.row.mt-1.opa.rounded > div:nth-child(4) > div:nth-child(1) > div:nth-child(1) > span:nth-child(3)"
TEXT_HUBS_HUB_PAX_ARRIVED = "div.row.mt-1.opa.rounded > div:nth-child(4) > div:nth-child(1) > div:nth-child(2) > span:nth-child(3)"
BUTTON_HUBS_HUB_MANAGE_BACK = "#hubReturnBtn > button:nth-child(1)"
ICON_HUBS_CATERING = "div.row.mt-1.opa.rounded span.glyphicons-fast-food"
BUTTON_HUBS_ADD_CATERING = "div#hubDetail button.btn-success:nth-child(1)"
ELEM_HUBS_CATERING_OPTION_3 = "div#caterMain div.col-4:nth-child(4)"
SELECT_HUBS_CATERING_DURATION = "div#caterMain select#durationSelector"
SELECT_HUBS_CATERING_AMOUNT = "div#caterMain select#caterAmount"
TEXT_HUBS_CATERING_COST = "div#caterMain span#sumCost"
BUTTON_HUBS_CATERING_BUY = "div#caterMain button#btnCaterDo"

# Company pop-up
TEXT_COMPANY_RANK = "div.text-secondary"
TEXT_COMPANY_STAFF_TRAINING_POINTS = "span#tPoints"
BUTTON_COMPANY_STAFF_TAB = BUTTON_COMMON_TAB3


def _salary_button(prefix: str, column: int) -> str:
    return f"#{prefix}_main > table:nth-child(1) > tbody:nth-child(1) > tr:nth-child(3) > td:nth-child({column}) > button:nth-child(1)"


# (staff type, salary text, morale text, salary up button)
STAFF_ENTRIES = (
    ("pilots", "#pilotSalary", "#pilotMorale", _salary_button("pilot", 1)),
    ("crew", "#crewSalary", "#crewMorale", _salary_button("crew", 1)),
    ("engineers", "#engineerSalary", "#engineerMorale", _salary_button("engineer", 1)),
    ("technicians", "#techSalary", "#techMorale", _salary_button("tech", 1)),
)

# Fuel pop-up
TEXT_FUEL_FUEL_PRICE = "div#fuelMain span#sumCost"
TEXT_FUEL_FUEL_HOLDING = "div#fuelMain #holding"
TEXT_FUEL_FUEL_CAPACITY = "div#fuelMain span.s-text:nth-child(4)"
TEXT_FIELD_FUEL_AMOUNT = "input#amountInput"
BUTTON_FUEL_BUY = "div#fuelMain button.btn-block:nth-child(2)"

# Maintenance pop-up
BUTTON_MAINTENANCE_BASE_ONLY = "div#maintAction button#baseOnly"
LIST_MAINTENANCE_AC_LIST = "div#maintAction div#acListView > div.at-base"
ATTR_MAINTENANCE_AC_REG_NUMBER = "data-reg"
ATTR_MAINTENANCE_AC_TYPE = "data-type"
BUTTON_MAINTENANCE_MODIFY = "div[role=\"group\"] button:nth-child(3)"
CHECKBOX_MAINTENANCE_MODIFY_MODS = tuple(
    f"div#typeModify table.table.table-sm.exo > tbody:nth-child(1) > tr:nth-child({n}) > td:nth-child(1) > label:nth-child(1) > span:nth-child(2)"
    for n in (1, 2, 3)
)
TEXT_MAINTENANCE_MODIFY_TOTAL_COST = "div#typeModify div.row > div.col-6.text-center > span.text-danger.font-weight-bold"
BUTTON_MAINTENANCE_PLAN_MODIFY = "div#typeModify button.btn-danger:nth-child(1)"
BUTTON_MAINTENANCE_BULK_ACHECK = "div#maintAction button[onclick=\"bulkCheck();\"]"
LIST_MAINTENANCE_BULK_ACHECK_AC_LIST = "div#maintAction div#bulkCheckList > div.bulk-check-row"
TEXT_MAINTENANCE_BULK_ACHECK_HOURS = "div.bulk-check-row span.bulk-check-hours"
TEXT_MAINTENANCE_BULK_ACHECK_COST = "div#maintAction span#bulkCheckCost"
BUTTON_MAINTENANCE_BULK_ACHECK_PLAN = "div#maintAction button#bulkCheckPlan"
BUTTON_MAINTENANCE_BULK_REPAIR = "div#maintAction button[onclick=\"bulkRepair();\"]"
SELECT_MAINTENANCE_BULK_REPAIR_PERCENT = "div#maintAction select#repairPct"
TEXT_MAINTENANCE_BULK_REPAIR_COST = "div#maintAction span#bulkRepairCost"
BUTTON_MAINTENANCE_BULK_REPAIR_PLAN = "div#maintAction button#bulkRepairPlan"

# Finance pop-up
BUTTON_FINANCE_MARKETING_NEW_COMPANY = "div#financeAction button#newCampaign"
ELEM_FINANCE_MARKETING_INC_AIRLINE_REP = "div#financeAction table.table:nth-child(2) > tbody:nth-child(1) > tr:nth-child(1)"
ELEM_FINANCE_MARKETING_INC_CARGO_REP = "div#financeAction table.table:nth-child(2) > tbody:nth-child(1) > tr:nth-child(2)"
ELEM_FINANCE_MARKETING_ECO_FRIENDLY = "div#financeAction table.table:nth-child(2) > tbody:nth-child(1) > tr:nth-child(3)"
SELECT_FINANCE_MARKETING_COMPANY_DURATION = "div#financeAction select#dSelector"
TEXT_FINANCE_MARKETING_REPUTATION_COST = "div#financeAction span#c4"
BUTTON_FINANCE_MARKETING_REPUTATION_BUY = "div#financeAction button#c4Btn"
BUTTON_FINANCE_MARKETING_ECO_FRIENDLY_BUY = "div#financeAction button.btn-danger:nth-child(1)"
LIST_FINANCE_MARKETING_COMPANIES = "div#financeAction #active-campaigns > table > tbody > tr"
TEXT_MARKETING_COMPANY_NAME = "tr > td:nth-child(1)"
TEXT_MARKETING_COMPANY_DURATION = "tr > td.hasCountdown > span"

# Bonus pop-up
BUTTON_BONUS_DUTY_FREE_TAB = "div#popContent button#dutyFree"
BUTTON_BONUS_CLAIM_GIFT = "div#popContent div#dutyFree button#claim_gift"

# Fleet & routes pop-up, route research tab
SELECT_FLEET_RESEARCH_DEPARTING_FROM = "div#popContent select#depSelect"
LIST_FLEET_RESEARCH_DEPARTING_FROM = "div#popContent select#depSelect > option"
TEXTFIELD_FLEET_RESEARCH_MAX_DISTANCE = "div#popContent input#maxDist"
TEXTFIELD_FLEET_RESEARCH_MIN_RUNWAY = "div#popContent input#minRwy"
BUTTON_FLEET_RESEARCH_SEARCH = "div#popContent button#researchBtn"
LIST_FLEET_RESEARCH_SEARCH_RESULTS = "div#popContent div#researchList > div.route-result"
TEXT_FLEET_RESEARCH_ROUTE_FROM = "div.route-result span.route-from"
TEXT_FLEET_RESEARCH_ROUTE_TO = "div.route-result span.route-to"
