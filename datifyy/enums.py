from enum import Enum


class GenderPreference(str, Enum):
	MALE = "Male"
	FEMALE = "Female"
	BOTH = "Both"

class SmokingPreference(str, Enum):
	YES = "Yes"
	NO = "No"
	OCCASIONALLY = "Occasional"

class DrinkingPreference(str, Enum):
	YES = "Yes"
	NO = "No"
	OCCASIONALLY = "Occasional"

class MaritalStatus(str, Enum):
	SINGLE = "Single"
	DIVORCED = "Divorced"
	WIDOWED = "Widowed"

class ChildrenPreference(str, Enum):
	YES = "Yes"
	NO = "No"
	DOESNT_MATTER = "Doesnt matter"

class ActivityLevel(str, Enum):
	LOW = "Low"
	MODERATE = "Medium"
	HIGH = "High"

class PetPreference(str, Enum):
	LIKES_PETS = "Yes"
	NO_PREFERENCE = "No"
	DOESNT_LIKE_PETS = "Doesn't matter"

class RelationshipGoals(str, Enum):
	CASUAL_DATING = "Casual Dating"
	SERIOUS_RELATIONSHIP = "Serious Relationship"
	FRIENDSHIP = "Friendship"
	MARRIAGE = "Marriage"
	DOESNT_MATTER = "Doesn't matter"

class Currency(str, Enum):
	USD = "USD"
	EUR = "EUR"
	GBP = "GBP"
	INR = "INR"
	AUD = "AUD"
	CAD = "CAD"
	JPY = "JPY"

class EducationLevel(str, Enum):
	HIGH_SCHOOL = "High School"
	ASSOCIATES = "Associate's"
	BACHELORS = "Bachelor's"
	MASTERS = "Master's"
	DOCTORATE = "Doctorate"
	PROFESSIONAL = "Professional"

class PersonalityTraits(str, Enum):
	INTROVERTED = "Introverted"
	EXTROVERTED = "Extroverted"
	AMBITIOUS = "Ambitious"
	CREATIVE = "Creative"
	FRIENDLY = "Friendly"
	HUMOROUS = "Humorous"
	KIND = "Kind"
	LOYAL = "Loyal"
	OPTIMISTIC = "Optimistic"
	PESSIMISTIC = "Pessimistic"
	RELIABLE = "Reliable"
	SENSITIVE = "Sensitive"
	SPONTANEOUS = "Spontaneous"
	THOUGHTFUL = "Thoughtful"

class Profession(str, Enum):
	STUDENT = "Student"
	SOFTWARE_ENGINEER = "Software Engineer"
	DOCTOR = "Doctor"
	TEACHER = "Teacher"
	LAWYER = "Lawyer"
	ACCOUNTANT = "Accountant"
	ENGINEER = "Engineer"
	NURSE = "Nurse"
	ARCHITECT = "Architect"
	CHEF = "Chef"
	ARTIST = "Artist"
	MUSICIAN = "Musician"
	WRITER = "Writer"
	JOURNALIST = "Journalist"
	PHOTOGRAPHER = "Photographer"
	SCIENTIST = "Scientist"
	RESEARCHER = "Researcher"
	ENTREPRENEUR = "Entrepreneur"
	BUSINESS_ANALYST = "Business Analyst"
	CONSULTANT = "Consultant"
	MARKETING_SPECIALIST = "Marketing Specialist"
	SALES_MANAGER = "Sales Manager"
	PRODUCT_MANAGER = "Product Manager"
	PROJECT_MANAGER = "Project Manager"
	HUMAN_RESOURCES = "Human Resources"
	FINANCIAL_ANALYST = "Financial Analyst"
	INVESTMENT_BANKER = "Investment Banker"
	REAL_ESTATE_AGENT = "Real Estate Agent"
	MECHANIC = "Mechanic"
	ELECTRICIAN = "Electrician"
	PLUMBER = "Plumber"
	CARPENTER = "Carpenter"
	PILOT = "Pilot"
	FLIGHT_ATTENDANT = "Flight Attendant"
	MILITARY_PERSONNEL = "Military Personnel"
	POLICE_OFFICER = "Police Officer"
	FIREFIGHTER = "Firefighter"
	PARAMEDIC = "Paramedic"
	DENTIST = "Dentist"
	PHARMACIST = "Pharmacist"
	VETERINARIAN = "Veterinarian"
	PSYCHOLOGIST = "Psychologist"
	SOCIAL_WORKER = "Social Worker"
	LIBRARIAN = "Librarian"
	TRANSLATOR = "Translator"
	INTERPRETER = "Interpreter"
	GRAPHIC_DESIGNER = "Graphic Designer"
	WEB_DEVELOPER = "Web Developer"
	UX_UI_DESIGNER = "UX/UI Designer"
	DATA_SCIENTIST = "Data Scientist"
	CYBER_SECURITY_SPECIALIST = "Cyber Security Specialist"
	NETWORK_ENGINEER = "Network Engineer"
	SYSTEM_ADMINISTRATOR = "System Administrator"
	IT_SUPPORT_SPECIALIST = "IT Support Specialist"
	CHEMIST = "Chemist"
	BIOLOGIST = "Biologist"
	PHYSICIST = "Physicist"
	MATHEMATICIAN = "Mathematician"
	ECONOMIST = "Economist"
	HISTORIAN = "Historian"
	GEOGRAPHER = "Geographer"
	ANTHROPOLOGIST = "Anthropologist"
	ARCHAEOLOGIST = "Archaeologist"
	SOCIOLOGIST = "Sociologist"

class Sports(str, Enum):
	CRICKET = "Cricket"
	FOOTBALL = "Football"
	HOCKEY = "Hockey"
	TENNIS = "Tennis"
	BADMINTON = "Badminton"
	KABADDI = "Kabaddi"
	BASKETBALL = "Basketball"
	VOLLEYBALL = "Volleyball"
	TABLE_TENNIS = "Table Tennis"
	BOXING = "Boxing"
	WRESTLING = "Wrestling"
	ATHLETICS = "Athletics"
	SWIMMING = "Swimming"
	GOLF = "Golf"
	CHESS = "Chess"

class Hobbies(str, Enum):
	READING = "Reading"
	TRAVELING = "Traveling"
	COOKING = "Cooking"
	GARDENING = "Gardening"
	PHOTOGRAPHY = "Photography"
	PAINTING = "Painting"
	WRITING = "Writing"
	FISHING = "Fishing"
	HIKING = "Hiking"
	CYCLING = "Cycling"
	SWIMMING = "Swimming"
	YOGA = "Yoga"
	DANCING = "Dancing"
	PLAYING_MUSIC = "Playing Music"
	KNITTING = "Knitting"

class Interests(str, Enum):
	TECHNOLOGY = "Technology"
	SCIENCE = "Science"
	ART = "Art"
	MUSIC = "Music"
	LITERATURE = "Literature"
	HISTORY = "History"
	TRAVEL = "Travel"
	FOOD = "Food"
	FITNESS = "Fitness"
	FASHION = "Fashion"
	PHOTOGRAPHY = "Photography"
	CINEMA = "Cinema"
	SPORTS = "Sports"
	GAMING = "Gaming"
	POLITICS = "Politics"
	NATURE = "Nature"
	ANIMALS = "Animals"
	ASTRONOMY = "Astronomy"
	PHILOSOPHY = "Philosophy"
	PSYCHOLOGY = "Psychology"

# Profile attributes

class Gender(str, Enum):
	MALE = "male"
	FEMALE = "female"
	OTHER = "other"

class Exercise(str, Enum):
	NONE = "None"
	LIGHT = "Light"
	MODERATE = "Moderate"
	HEAVY = "Heavy"

class ProfileEducationLevel(str, Enum):
	HIGH_SCHOOL = "High School"
	UNDERGRADUATE = "Undergraduate"
	GRADUATE = "Graduate"
	POSTGRADUATE = "Postgraduate"

class DrinkingHabit(str, Enum):
	NEVER = "Never"
	OCCASIONALLY = "Occasionally"
	REGULARLY = "Regularly"

class SmokingHabit(str, Enum):
	NEVER = "Never"
	OCCASIONALLY = "Occasionally"
	REGULARLY = "Regularly"

class LookingFor(str, Enum):
	FRIENDSHIP = "Friendship"
	CASUAL = "Casual"
	RELATIONSHIP = "Relationship"

class SettleDownTimeframe(str, Enum):
	ZERO_TO_SIX = "0-6"
	SIX_TO_TWELVE = "6-12"
	TWELVE_TO_TWENTY_FOUR = "12-24"
	TWENTY_FOUR_PLUS = "24+"

class StarSign(str, Enum):
	ARIES = "Aries"
	TAURUS = "Taurus"
	GEMINI = "Gemini"
	CANCER = "Cancer"
	LEO = "Leo"
	VIRGO = "Virgo"
	LIBRA = "Libra"
	SCORPIO = "Scorpio"
	SAGITTARIUS = "Sagittarius"
	CAPRICORN = "Capricorn"
	AQUARIUS = "Aquarius"
	PISCES = "Pisces"

class Pronoun(str, Enum):
	HE_HIM = "He/Him"
	SHE_HER = "She/Her"
	THEY_THEM = "They/Them"
	OTHER = "Other"

class VerificationType(str, Enum):
	EMAIL = "email"
	PHONE = "phone"
	AADHAR = "aadhar"
