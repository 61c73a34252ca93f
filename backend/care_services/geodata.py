from __future__ import annotations

# city -> (latitude, longitude); insertion order drives partial matching
CITY_COORDINATES: dict[str, tuple[float, float]] = {
    "Mumbai": (19.0760, 72.8777),
    "Delhi": (28.7041, 77.1025),
    "New Delhi": (28.6139, 77.2090),
    "Bangalore": (12.9716, 77.5946),
    "Bengaluru": (12.9716, 77.5946),
    "Hyderabad": (17.3850, 78.4867),
    "Ahmedabad": (23.0225, 72.5714),
    "Chennai": (13.0827, 80.2707),
    "Kolkata": (22.5726, 88.3639),
    "Surat": (21.1702, 72.8311),
    "Pune": (18.5204, 73.8567),
    "Jaipur": (26.9124, 75.7873),
    "Lucknow": (26.8467, 80.9462),
    "Kanpur": (26.4499, 80.3319),
    "Nagpur": (21.1458, 79.0882),
    "Indore": (22.7196, 75.8577),
    "Thane": (19.2183, 72.9781),
    "Bhopal": (23.2599, 77.4126),
    "Visakhapatnam": (17.6868, 83.2185),
    "Pimpri-Chinchwad": (18.6298, 73.7997),
    "Patna": (25.5941, 85.1376),
    "Vadodara": (22.3072, 73.1812),
    "Ghaziabad": (28.6692, 77.4538),
    "Ludhiana": (30.9010, 75.8573),
    "Agra": (27.1767, 78.0081),
    "Nashik": (19.9975, 73.7898),
    "Faridabad": (28.4089, 77.3178),
    "Meerut": (28.9845, 77.7064),
    "Rajkot": (22.3039, 70.8022),
    "Kalyan-Dombivli": (19.2403, 73.1305),
    "Vasai-Virar": (19.4912, 72.8054),
    "Varanasi": (25.3176, 82.9739),
    "Srinagar": (34.0837, 74.7973),
    "Aurangabad": (19.8762, 75.3433),
    "Dhanbad": (23.7957, 86.4304),
    "Amritsar": (31.6340, 74.8723),
    "Navi Mumbai": (19.0330, 73.0297),
    "Allahabad": (25.4358, 81.8463),
    "Prayagraj": (25.4358, 81.8463),
    "Ranchi": (23.3441, 85.3096),
    "Howrah": (22.5958, 88.2636),
    "Coimbatore": (11.0168, 76.9558),
    "Jabalpur": (23.1815, 79.9864),
    "Gwalior": (26.2183, 78.1828),
    "Vijayawada": (16.5062, 80.6480),
    "Jodhpur": (26.2389, 73.0243),
    "Madurai": (9.9252, 78.1198),
    "Raipur": (21.2514, 81.6296),
    "Kota": (25.2138, 75.8648),
    "Chandigarh": (30.7333, 76.7794),
    "Guwahati": (26.1445, 91.7362),
    "Solapur": (17.6599, 75.9064),
    "Hubli-Dharwad": (15.3647, 75.1240),
    "Bareilly": (28.3670, 79.4304),
    "Moradabad": (28.8386, 78.7733),
    "Mysore": (12.2958, 76.6394),
    "Mysuru": (12.2958, 76.6394),
    "Gurugram": (28.4595, 77.0266),
    "Gurgaon": (28.4595, 77.0266),
    "Aligarh": (27.8974, 78.0880),
    "Jalandhar": (31.3260, 75.5762),
    "Tiruchirappalli": (10.7905, 78.7047),
    "Trichy": (10.7905, 78.7047),
    "Bhubaneswar": (20.2961, 85.8245),
    "Salem": (11.6643, 78.1460),
    "Warangal": (17.9689, 79.5941),
    "Guntur": (16.3067, 80.4365),
    "Bhiwandi": (19.3002, 73.0630),
    "Saharanpur": (29.9680, 77.5552),
    "Gorakhpur": (26.7606, 83.3732),
    "Bikaner": (28.0229, 73.3119),
    "Amravati": (20.9374, 77.7796),
    "Noida": (28.5355, 77.3910),
    "Jamshedpur": (22.8046, 86.2029),
    "Bhilai Nagar": (21.1938, 81.3509),
    "Cuttack": (20.4625, 85.8828),
    "Firozabad": (27.1592, 78.3957),
    "Kochi": (9.9312, 76.2673),
    "Cochin": (9.9312, 76.2673),
    "Bhavnagar": (21.7645, 72.1519),
    "Dehradun": (30.3165, 78.0322),
    "Durgapur": (23.4800, 87.3119),
    "Asansol": (23.6739, 86.9524),
    "Rourkela": (22.2604, 84.8536),
    "Nanded": (19.1383, 77.2975),
    "Kolhapur": (16.7050, 74.2433),
    "Ajmer": (26.4499, 74.6399),
    "Akola": (20.7002, 77.0082),
    "Gulbarga": (17.3297, 76.8343),
    "Jamnagar": (22.4707, 70.0577),
    "Ujjain": (23.1765, 75.7885),
    "Loni": (28.7461, 77.2897),
    "Siliguri": (26.7271, 88.3953),
    "Jhansi": (25.4484, 78.5685),
    "Ulhasnagar": (19.2215, 73.1645),
    "Jammu": (32.7266, 74.8570),
    "Sangli-Miraj & Kupwad": (16.8524, 74.5815),
    "Mangalore": (12.9141, 74.8560),
    "Erode": (11.3410, 77.7172),
    "Belgaum": (15.8497, 74.4977),
    "Ambattur": (13.1143, 80.1548),
    "Tirunelveli": (8.7139, 77.7567),
    "Malegaon": (20.5579, 74.5287),
    "Gaya": (24.7914, 85.0002),
    "Jalgaon": (21.0077, 75.5626),
    "Udaipur": (24.5714, 73.6953),
    "Maheshtala": (22.5098, 88.2490),
    "New York": (40.7128, -74.0060),
    "Los Angeles": (34.0522, -118.2437),
    "London": (51.5074, -0.1278),
    "Paris": (48.8566, 2.3522),
    "Tokyo": (35.6762, 139.6503),
    "Sydney": (-33.8688, 151.2093),
    "Dubai": (25.2048, 55.2708),
    "Singapore": (1.3521, 103.8198),
}

DEFAULT_COORDINATES: tuple[float, float] = (28.7041, 77.1025)

REFERENCE_CITIES: list[tuple[str, float, float]] = [
    ("New York", 40.7128, -74.0060),
    ("Los Angeles", 34.0522, -118.2437),
    ("Chicago", 41.8781, -87.6298),
    ("Houston", 29.7604, -95.3698),
    ("Phoenix", 33.4484, -112.0740),
    ("Philadelphia", 39.9526, -75.1652),
    ("San Antonio", 29.4241, -98.4936),
    ("San Diego", 32.7157, -117.1611),
    ("Dallas", 32.7767, -96.7970),
    ("San Jose", 37.3382, -121.8863),
    ("Austin", 30.2672, -97.7431),
    ("Jacksonville", 30.3322, -81.6557),
    ("San Francisco", 37.7749, -122.4194),
    ("Columbus", 39.9612, -82.9988),
    ("Indianapolis", 39.7684, -86.1581),
    ("Fort Worth", 32.7555, -97.3308),
    ("Charlotte", 35.2271, -80.8431),
    ("Seattle", 47.6062, -122.3321),
    ("Denver", 39.7392, -104.9903),
    ("Boston", 42.3601, -71.0589),
    ("Detroit", 42.3314, -83.0458),
    ("Nashville", 36.1627, -86.7816),
    ("Memphis", 35.1495, -90.0490),
    ("Portland", 45.5152, -122.6784),
    ("Oklahoma City", 35.4676, -97.5164),
    ("Las Vegas", 36.1699, -115.1398),
    ("Louisville", 38.2527, -85.7585),
    ("Baltimore", 39.2904, -76.6122),
    ("Milwaukee", 43.0389, -87.9065),
    ("Albuquerque", 35.0844, -106.6504),
    ("Tucson", 32.2226, -110.9747),
    ("Fresno", 36.7378, -119.7871),
    ("Sacramento", 38.5816, -121.4944),
    ("Mesa", 33.4152, -111.8315),
    ("Kansas City", 39.0997, -94.5786),
    ("Atlanta", 33.7490, -84.3880),
    ("Miami", 25.7617, -80.1918),
    ("Tampa", 27.9506, -82.4572),
    ("New Orleans", 29.9511, -90.0715),
    ("Cleveland", 41.4993, -81.6944),
    ("London", 51.5074, -0.1278),
    ("Paris", 48.8566, 2.3522),
    ("Tokyo", 35.6762, 139.6503),
    ("Sydney", -33.8688, 151.2093),
    ("Toronto", 43.6532, -79.3832),
    ("Berlin", 52.5200, 13.4050),
    ("Madrid", 40.4168, -3.7038),
    ("Rome", 41.9028, 12.4964),
    ("Amsterdam", 52.3676, 4.9041),
    ("Dubai", 25.2048, 55.2708),
    ("Singapore", 1.3521, 103.8198),
]

INDIAN_CITIES: list[str] = [
    # Major Metro Cities
    "Mumbai", "Delhi", "New Delhi", "Bangalore", "Bengaluru", "Hyderabad", "Ahmedabad", "Chennai",
    "Kolkata", "Surat", "Pune", "Jaipur", "Lucknow", "Kanpur", "Nagpur", "Indore", "Thane",
    "Bhopal", "Visakhapatnam", "Pimpri-Chinchwad", "Patna", "Vadodara", "Ghaziabad", "Ludhiana",
    "Agra", "Nashik", "Faridabad", "Meerut", "Rajkot", "Kalyan-Dombivli", "Vasai-Virar",
    "Varanasi", "Srinagar", "Aurangabad", "Dhanbad", "Amritsar", "Navi Mumbai", "Allahabad",
    "Prayagraj", "Ranchi", "Howrah", "Coimbatore", "Jabalpur", "Gwalior", "Vijayawada", "Jodhpur",
    "Madurai", "Raipur", "Kota", "Chandigarh", "Guwahati", "Solapur", "Hubli-Dharwad", "Bareilly",
    "Moradabad", "Mysore", "Mysuru", "Gurugram", "Gurgaon", "Aligarh", "Jalandhar",
    "Tiruchirappalli", "Trichy", "Bhubaneswar", "Salem", "Warangal", "Guntur", "Bhiwandi",
    "Saharanpur", "Gorakhpur", "Bikaner", "Amravati", "Noida", "Jamshedpur", "Bhilai Nagar",
    "Cuttack", "Firozabad", "Kochi", "Cochin", "Bhavnagar", "Dehradun", "Durgapur", "Asansol",
    "Rourkela", "Nanded", "Kolhapur", "Ajmer", "Akola", "Gulbarga", "Jamnagar", "Ujjain", "Loni",
    "Siliguri", "Jhansi", "Ulhasnagar", "Jammu", "Sangli-Miraj & Kupwad", "Mangalore", "Erode",
    "Belgaum", "Ambattur", "Tirunelveli", "Malegaon", "Gaya", "Jalgaon", "Udaipur", "Maheshtala",
    # State Capitals and Important Cities
    "Gandhinagar", "Panaji", "Shimla", "Itanagar", "Dispur", "Imphal", "Shillong", "Aizawl",
    "Kohima", "Gangtok", "Agartala", "Kavaratti",
    # Major Towns and Cities by State
    # Andhra Pradesh
    "Tirupati", "Anantapur", "Chittoor", "Eluru", "Kadapa", "Kakinada", "Kurnool", "Machilipatnam",
    "Nellore", "Ongole", "Rajahmundry", "Srikakulam", "Tadepalligudem", "Tenali", "Vizianagaram",
    # Arunachal Pradesh
    "Naharlagun", "Pasighat", "Bomdila", "Tawang", "Ziro", "Along", "Tezu", "Khonsa",
    # Assam
    "Jorhat", "Dibrugarh", "Silchar", "Tezpur", "Nagaon", "Tinsukia", "Bongaigaon", "Dhubri",
    "North Lakhimpur", "Karimganj", "Sibsagar", "Goalpara", "Barpeta", "Mangaldoi", "Nalbari",
    "Rangia", "Marigaon", "Haflong", "Kokrajhar", "Mushalpur",
    # Bihar
    "Darbhanga", "Muzaffarpur", "Purnia", "Bhagalpur", "Arrah", "Begusarai", "Katihar", "Munger",
    "Chhapra", "Danapur", "Bettiah", "Saharsa", "Hajipur", "Sasaram", "Dehri", "Siwan", "Motihari",
    "Nawada", "Bagaha", "Buxar", "Kishanganj", "Sitamarhi", "Jamalpur", "Jehanabad", "Aurangabad",
    # Chhattisgarh
    "Bilaspur", "Korba", "Durg", "Rajnandgaon", "Jagdalpur", "Raigarh", "Ambikapur", "Mahasamund",
    "Dhamtari", "Chirmiri", "Champa", "Jashpur", "Kanker", "Akaltara", "Dongargarh", "Bhatapara",
    "Baikunthpur", "Ratanpur", "Naila Janjgir", "Tilda Newra", "Mungeli", "Pathalgaon", "Raigarh",
    "Sarangarh", "Takhatpur",
    # Goa
    "Margao", "Vasco da Gama", "Mapusa", "Ponda", "Bicholim", "Curchorem", "Valpoi", "Pernem",
    "Cuncolim", "Canacona", "Quepem", "Sanguem", "Sanquelim", "Sattari", "Shiroda", "Aldona",
    "Assagao", "Benaulim", "Calangute", "Candolim", "Colva", "Morjim", "Arambol", "Anjuna", "Baga",
    # Gujarat
    "Anand", "Bharuch", "Bhuj", "Gandhidham", "Godhra", "Junagadh", "Mehsana", "Morbi", "Nadiad",
    "Navsari", "Palanpur", "Patan", "Porbandar", "Surendranagar", "Valsad", "Veraval",
    "Ankleshwar", "Deesa", "Jetpur", "Kalol", "Keshod", "Khambhat", "Mahuva", "Mandvi", "Modasa",
    "Mundra", "Okha", "Palitana", "Radhanpur", "Salaya", "Talaja", "Una", "Upleta", "Vyara",
    "Wankaner",
    # Haryana
    "Ambala", "Bahadurgarh", "Bhiwani", "Faridabad", "Fatehabad", "Hisar", "Jhajjar", "Jind",
    "Kaithal", "Karnal", "Kurukshetra", "Mahendragarh", "Mewat", "Palwal", "Panchkula", "Panipat",
    "Rewari", "Rohtak", "Sirsa", "Sonipat", "Thanesar", "Yamunanagar", "Ballabgarh",
    "Charkhi Dadri", "Dabwali", "Ellenabad", "Hansi", "Hodal", "Jakhal", "Kalka", "Ladwa",
    "Mahendragarh", "Narnaul", "Nilokheri", "Pehowa", "Pinjore", "Ratia", "Safidon", "Samalkha",
    "Shahabad", "Taraori", "Tohana",
    # Himachal Pradesh
    "Dharamshala", "Solan", "Mandi", "Palampur", "Baddi", "Nahan", "Paonta Sahib", "Sundernagar",
    "Chamba", "Una", "Hamirpur", "Bilaspur", "Yol", "Gagret", "Nurpur", "Kangra", "Nagrota Bagwan",
    "Jawalamukhi", "Jogindernagar", "Baijnath", "Banjar", "Bhuntar", "Kullu", "Manali", "Keylong",
    "Kaza", "Reckong Peo", "Kalpa", "Sangla", "Sarahan", "Rampur", "Rohru", "Theog", "Arki",
    "Kandaghat", "Kasauli", "Parwanoo", "Rajgarh", "Renuka", "Narkanda", "Fagu", "Kufri",
    "Mashobra", "Naldehra", "Tattapani",
    # Jharkhand
    "Bokaro", "Deoghar", "Dhanbad", "Giridih", "Hazaribag", "Medininagar", "Phusro", "Ramgarh",
    "Jhumri Telaiya", "Chatra", "Chaibasa", "Dumka", "Godda", "Gumla", "Hunterganj", "Jamtara",
    "Khunti", "Koderma", "Latehar", "Lohardaga", "Pakur", "Palamu", "Rajmahal", "Sahibganj",
    "Seraikela", "Simdega", "Mihijam", "Nirsa", "Sindri", "Tenu Dam-cum-Kathhara",
    # Karnataka
    "Bellary", "Bijapur", "Gulbarga", "Hubli", "Mangalore", "Mysore", "Shimoga", "Tumkur",
    "Belgaum", "Davangere", "Hospet", "Gadag-Betageri", "Robertson Pet", "Bhadravati",
    "Chitradurga", "Hassan", "Mandya", "Raichur", "Bidar", "Bagalkot", "Jamkhandi", "Ranebennuru",
    "Gangawati", "Chikmagalur", "Udupi", "Karwar", "Kolar", "Mandya", "Shivamogga", "Tiptur",
    "Arsikere", "Channapatna", "Doddaballapur", "Gokak", "Gubbi", "Hassan", "Hoskote", "Karkala",
    "Kundapura", "Madhugiri", "Malur", "Ramanagara", "Sidlaghatta", "Srinivaspur", "Tarikere",
    "Yadgir",
    # Kerala
    "Thiruvananthapuram", "Kollam", "Pathanamthitta", "Alappuzha", "Kottayam", "Idukki",
    "Ernakulam", "Thrissur", "Palakkad", "Malappuram", "Kozhikode", "Wayanad", "Kannur",
    "Kasaragod", "Adoor", "Kayamkulam", "Nedumangad", "Neyyattinkara", "Paravur", "Punalur",
    "Chavakkad", "Guruvayur", "Kodungallur", "Kunnamkulam", "Mala", "Thrippunithura",
    "North Paravur", "Aluva", "Angamaly", "Kalamassery", "Kothamangalam", "Muvattupuzha",
    "Perumbavoor", "Chalakudy", "Irinjalakuda", "Kodakara", "Shoranur", "Ottappalam", "Pattambi",
    "Cherpulassery", "Kondotty", "Koyilandy", "Vadakara", "Kalpetta", "Mananthavady",
    "Sulthan Bathery", "Taliparamba", "Payyannur", "Kanhangad", "Nileshwar",
    # Madhya Pradesh
    "Gwalior", "Jabalpur", "Ujjain", "Sagar", "Dewas", "Satna", "Indore", "Burhanpur", "Khandwa",
    "Morena", "Bhind", "Guna", "Shivpuri", "Vidisha", "Chhatarpur", "Damoh", "Mandsaur", "Neemuch",
    "Ratlam", "Shajapur", "Ashok Nagar", "Balaghat", "Betul", "Datia", "Katni", "Narsinghpur",
    "Raisen", "Sehore", "Seoni", "Singrauli", "Tikamgarh", "Shahdol", "Anuppur", "Dindori",
    "Mandla", "Umaria", "Dhar", "Jhabua", "Khargone", "Alirajpur", "Barwani", "Chhindwara",
    "Harda", "Hoshangabad", "Pandhurna", "Multai", "Pipariya", "Itarsi", "Bhopal", "Sehore",
    "Raisen",
    # Maharashtra
    "Nagpur", "Pune", "Mumbai", "Nashik", "Aurangabad", "Solapur", "Amravati", "Kolhapur",
    "Sangli", "Akola", "Latur", "Dhule", "Ahmednagar", "Chandrapur", "Parbhani", "Jalgaon",
    "Bhiwandi", "Nanded", "Malegaon", "Yavatmal", "Satara", "Beed", "Wardha", "Osmanabad",
    "Gondia", "Bhandara", "Washim", "Hingoli", "Gadchiroli", "Buldhana", "Jalna", "Ratnagiri",
    "Sindhudurg", "Thane", "Raigad", "Alibag", "Panvel", "Badlapur", "Ambarnath", "Ulhasnagar",
    "Dombivli", "Kalyan", "Mira-Bhayandar", "Vasai-Virar", "Nalasopara", "Virar", "Palghar",
    "Dahanu", "Talasari", "Jawhar", "Mokhada", "Vikramgad", "Wada", "Shahapur", "Karjat",
    "Khopoli", "Pen", "Uran", "Roha", "Sudhagad", "Tala", "Shrivardhan", "Dapoli", "Guhagar",
    "Chiplun", "Khed", "Lanja", "Rajapur", "Sawantwadi", "Kudal", "Malvan", "Vengurla", "Dodamarg",
    # Manipur
    "Imphal", "Thoubal", "Bishnupur", "Churachandpur", "Senapati", "Ukhrul", "Chandel",
    "Tamenglong", "Jiribam", "Kangpokpi", "Tengnoupal", "Pherzawl", "Noney", "Kamjong", "Kakching",
    "Lilong", "Mayang Imphal", "Nambol", "Wangjing", "Yairipok", "Moreh", "Mao", "Senapati",
    "Kangpokpi", "Saitu Gamphazol", "Henglep", "Kalapahar", "Lamphel", "Sagolband", "Wangkhei",
    "Singjamei",
    # Meghalaya
    "Shillong", "Tura", "Cherrapunji", "Mawkyrwat", "Nongpoh", "Baghmara", "Ampati", "Resubelpara",
    "Williamnagar", "Jowai", "Khliehriat", "Nongstoin", "Mawsynram", "Dawki", "Mairang", "Nongpoh",
    "Byrnihat", "Umiam", "Barapani", "Sohra", "Mawlynnong", "Nongriat", "Laitkyrhong", "Mawphlang",
    # Mizoram
    "Aizawl", "Lunglei", "Saiha", "Champhai", "Kolasib", "Lawngtlai", "Mamit", "Serchhip",
    "Hnahthial", "Saitual", "Khawzawl", "Zawlnuam", "Thenzawl", "Darlawn", "North Vanlaiphai",
    "Tlabung", "Bairabi", "Vairengte", "Bilkhawthlir", "Bualpui", "Chanmari", "Chawngte",
    "Demagiri", "Haulawng", "Khawhai", "Khuangchera", "Lengpui", "Ngopa", "Phullen", "Ratu",
    "Sakawrdai", "Seling", "Tuipang", "Tuirial", "Vaphai",
    # Nagaland
    "Kohima", "Dimapur", "Mokokchung", "Tuensang", "Wokha", "Zunheboto", "Phek", "Kiphire",
    "Longleng", "Peren", "Mon", "Chumukedima", "Tseminyu", "Niuland", "Bhandari", "Tizit",
    "Shamator", "Changtongya", "Aboi", "Chen", "Longkhim", "Noksen", "Ralan", "Tuli", "Ungma",
    "Arkakong", "Chare", "Longjang", "Longsa", "Medziphema", "Pfutsero", "Satakha", "Seyochung",
    "Suruhuto", "Tening", "Tuophema", "Wokha", "Yelimno",
    # Odisha
    "Bhubaneswar", "Cuttack", "Rourkela", "Brahmapur", "Sambalpur", "Puri", "Balasore", "Bhadrak",
    "Baripada", "Jharsuguda", "Jeypore", "Barbil", "Khordha", "Balangir", "Rayagada", "Koraput",
    "Nabarangpur", "Malkangiri", "Nuapada", "Kalahandi", "Kandhamal", "Gajapati", "Ganjam",
    "Nayagarh", "Kendrapara", "Jagatsinghapur", "Dhenkanal", "Angul", "Keonjhar", "Mayurbhanj",
    "Sundargarh", "Deogarh", "Jajpur", "Kendujhar", "Paradip", "Konark", "Gopalpur", "Chandipur",
    "Talcher", "Rajgangpur", "Rourkela", "Sunabeda", "Titlagarh", "Phulbani", "Bhawanipatna",
    "Gunupur", "Parlakhemundi", "Berhampur", "Chhatrapur", "Hinjilicut", "Polasara",
    "Purusottampur", "Sanakhemundi", "Sorada", "Khallikote", "Digapahandi", "Ganjam", "Aska",
    "Kabisuryanagar", "Bhanjanagar",
    # Punjab
    "Ludhiana", "Amritsar", "Jalandhar", "Patiala", "Bathinda", "Mohali", "Firozpur", "Batala",
    "Pathankot", "Moga", "Abohar", "Malerkotla", "Khanna", "Phagwara", "Muktsar", "Barnala",
    "Rajpura", "Hoshiarpur", "Kapurthala", "Faridkot", "Sunam", "Sangrur", "Fazilka", "Gurdaspur",
    "Kharar", "Gobindgarh", "Mansa", "Malout", "Nabha", "Tarn Taran", "Jagraon", "Adampur",
    "Nakodar", "Nangal", "Zirakpur", "Kot Kapura", "Ropar", "Samana", "Shahkot", "Sultanpur Lodhi",
    "Talwandi Sabo", "Tapa", "Raikot", "Budhlada", "Chandigarh", "Dera Bassi", "Dhuri",
    "Dinanagar", "Doraha", "Gidderbaha", "Jandiala", "Kalanaur", "Khem Karan", "Kiratpur Sahib",
    "Kot Fatta", "Laungowal", "Lehragaga", "Longowal", "Machhiwara", "Majitha", "Maur", "Moonak",
    "Morinda", "Mukerian", "Naina Devi", "Nawanshahr", "Payal", "Qadian", "Quadian", "Raman",
    "Rayya", "Rupnagar", "Sahnewal", "Samrala", "Sanaur", "Sardulgarh", "Shahpur Kandi",
    "Sirhind Fatehgarh Sahib", "Sujanpur", "Zira",
    # Rajasthan
    "Jaipur", "Jodhpur", "Kota", "Bikaner", "Ajmer", "Udaipur", "Bhilwara", "Alwar", "Bharatpur",
    "Sikar", "Pali", "Sri Ganganagar", "Kishangarh", "Baran", "Dhaulpur", "Tonk", "Beawar",
    "Hanumangarh", "Gangapur City", "Banswara", "Bundi", "Jhalawar", "Churu", "Jhunjhunu",
    "Nagaur", "Sawai Madhopur", "Makrana", "Sujangarh", "Lachhmangarh", "Ratangarh",
    "Sardarshahar", "Nokha", "Nimbahera", "Suratgarh", "Rajsamand", "Lachhmangarh Shekhawati",
    "Rajgarh", "Nasirabad", "Nohar", "Phalodi", "Nathdwara", "Pilani", "Merta City", "Karauli",
    "Hindaun", "Pratapgarh", "Keshoraipatan", "Amet", "Sagwara", "Gharsana", "Raisinghnagar",
    "Anupgarh", "Rawatsar", "Padampur", "Rajakhera", "Shahpura", "Shahpura", "Taranagar", "Kumher",
    "Kekri", "Kuchaman City", "Makrana", "Malpura", "Nadbai", "Nagar", "Newai", "Nimaj", "Phagi",
    "Rajgarh", "Reengus", "Sambhar", "Shahpura", "Thanagazi", "Tijara", "Viratnagar",
    # Sikkim
    "Gangtok", "Namchi", "Gyalshing", "Mangan", "Jorethang", "Nayabazar", "Singtam", "Rangpo",
    "Pelling", "Yuksom", "Lachung", "Lachen", "Chungthang", "Ranipool", "Pakyong", "Soreng",
    "Dentam", "Kalimpong", "Rhenock", "Rongli", "Tadong", "Majitar", "Ravangla", "Legship",
    "Hee Bermiok", "Melli", "Naga", "Reshi", "Rhenock", "Samdong", "Sang", "Tikjuk", "Tinkitam",
    "Tsomgo", "Yumthang",
    # Tamil Nadu
    "Chennai", "Coimbatore", "Madurai", "Tiruchirappalli", "Salem", "Tirunelveli", "Tiruppur",
    "Vellore", "Erode", "Thoothukkudi", "Dindigul", "Thanjavur", "Ranipet", "Sivakasi", "Karur",
    "Udhagamandalam", "Hosur", "Nagercoil", "Kanchipuram", "Kumarakoil", "Karaikkudi", "Neyveli",
    "Cuddalore", "Kumbakonam", "Tiruvannamalai", "Pollachi", "Rajapalayam", "Gudiyatham",
    "Pudukkottai", "Vaniyambadi", "Ambur", "Nagapattinam", "Krishnagiri", "Thiruvallur",
    "Chidambaram", "Tirupattur", "Gobichettipalayam", "Mettur", "Bhavani", "Poonamallee",
    "Arakkonam", "Kanyakumari", "Mahabalipuram", "Pondicherry", "Villupuram", "Tindivanam",
    "Gingee", "Panruti", "Ulundurpet", "Cheyyar", "Tirukovilur", "Mayavaram", "Mannargudi",
    "Pattukkottai", "Aranthangi", "Thiruthuraipoondi", "Vedaranyam", "Nagore", "Sirkazhi",
    "Poompuhar", "Tranquebar", "Velankanni", "Point Calimere", "Kodaikanal", "Yercaud", "Ooty",
    "Coonoor", "Kotagiri", "Gudalur", "Valparai", "Munnar", "Thekkady", "Kumily", "Periyar",
    "Rameswaram", "Dhanushkodi", "Mandapam", "Kilakarai", "Ramanathapuram", "Paramakudi",
    "Mudukulathur", "Aruppukkottai", "Sattur", "Virudhunagar", "Srivilliputhur", "Sankarankovil",
    "Tenkasi", "Courtallam", "Shencottah", "Ambasamudram", "Kallidaikurichi", "Nanguneri",
    "Radhapuram", "Tiruchendur", "Kulasekharapatnam", "Ottapidaram", "Kovilpatti", "Kayathar",
    "Vilathikulam", "Sathankulam", "Tiruvallur", "Ponneri", "Gummidipoondi", "Sholavandan",
    "Andipatti", "Bodinayakanur", "Theni", "Periyakulam", "Uthamapalayam", "Cumbum", "Gudalur",
    "Devakottai", "Ilayangudi", "Karaikudi", "Sivaganga", "Tirupathur", "Singampunari",
    "Manamadurai", "Paramakudi", "Ramanathapuram", "Mudukulathur", "Kamuthi", "Tiruvadanai",
    "Bogalur", "Kilakarai", "Kadaladi", "Erwadi", "Sayalkudi", "Thangachimadam", "Mandapam",
    "Pamban", "Rameswaram", "Dhanushkodi",
    # Telangana
    "Hyderabad", "Warangal", "Nizamabad", "Khammam", "Karimnagar", "Ramagundam", "Mahabubnagar",
    "Nalgonda", "Adilabad", "Suryapet", "Miryalaguda", "Jagtial", "Mancherial", "Nirmal",
    "Kothagudem", "Bodhan", "Sangareddy", "Metpally", "Zahirabad", "Medak", "Siddipet", "Jangaon",
    "Bhongir", "Kamareddy", "Vikarabad", "Wanaparthy", "Gadwal", "Nagarkurnool", "Narayanpet",
    "Medchal", "Shamshabad", "Keesara", "Ghatkesar", "Uppal", "LB Nagar", "Vanasthalipuram",
    "Hayathnagar", "Ibrahimpatnam", "Yacharam", "Maheshwaram", "Rajendranagar", "Shankarpalle",
    "Chevella", "Moinabad", "Pargi", "Kandukur", "Farooqnagar", "Shadnagar", "Maheswaram",
    "Ibrahimpatnam", "Yacharam", "Hayathnagar", "Ghatkesar", "Keesara", "Medchal", "Shamirpet",
    "Quthbullapur", "Balanagar", "Kukatpally", "Miyapur", "Gachibowli", "Madhapur", "Kondapur",
    "Hitech City", "Jubilee Hills", "Banjara Hills", "Somajiguda", "Ameerpet", "SR Nagar",
    "Erragadda", "Borabanda", "Sanathnagar", "Moosapet", "Begumpet", "Secunderabad",
    "Trimulgherry", "Alwal", "Bolaram", "Yapral", "Kompally", "Quthbullapur", "Jeedimetla",
    "Suraram", "Subhash Nagar", "Neredmet", "Malkajgiri", "Sainikpuri", "AS Rao Nagar", "ECIL",
    "Dammaiguda", "Nagaram", "Cherlapally", "Uppal", "Boduppal", "Peerzadiguda", "Medipally",
    "Nacharam", "Habsiguda", "Tarnaka", "Vidyanagar", "Chilkalguda", "Secunderabad Cantonment",
    "Trimulgherry", "Bolaram", "Yapral", "Kompally", "Quthbullapur", "Jeedimetla",
    # Tripura
    "Agartala", "Dharmanagar", "Udaipur", "Kailasahar", "Belonia", "Khowai", "Teliamura",
    "Sabroom", "Kumarghat", "Sonamura", "Panisagar", "Amarpur", "Ranirbazar", "Kamalpur",
    "Gandacherra", "Longtharai Valley", "Jampui Hills", "Jirania", "Mohanpur", "Melaghar",
    "Bishalgarh", "Boxanagar", "Nalchar", "Hrishyamukh", "Manu", "Kakraban", "Chailengta",
    "Damcherra", "Fatikroy", "Kanchanpur", "Krishnapur", "Lefunga", "Matabari", "Ompi", "Rajnagar",
    "Sidhai", "Tuikarmaw", "Jampui Hill", "Vanghmun", "Chawmanu", "Damta", "Dukli", "Lawngtlai",
    "Mamit", "Reiek", "Sakhan", "Tlabung", "Tuipang", "Zawlnuam",
    # Uttar Pradesh
    "Lucknow", "Kanpur", "Ghaziabad", "Agra", "Varanasi", "Meerut", "Allahabad", "Prayagraj",
    "Bareilly", "Moradabad", "Saharanpur", "Gorakhpur", "Firozabad", "Jhansi", "Muzaffarnagar",
    "Mathura", "Budaun", "Rampur", "Shahjahanpur", "Farrukhabad", "Mau", "Hapur", "Noida",
    "Etawah", "Mirzapur", "Bulandshahr", "Sambhal", "Amroha", "Hardoi", "Fatehpur", "Raebareli",
    "Orai", "Sitapur", "Bahraich", "Modinagar", "Unnao", "Jaunpur", "Lakhimpur", "Hathras",
    "Banda", "Pilibhit", "Barabanki", "Khurja", "Gonda", "Mainpuri", "Lalitpur", "Etah", "Deoria",
    "Ujhani", "Ghazipur", "Sultanpur", "Azamgarh", "Bijnor", "Sahaswan", "Basti", "Chandausi",
    "Akbarpur", "Ballia", "Tanda", "Greater Noida", "Shikohabad", "Shamli", "Awagarh", "Kasganj",
    # Uttarakhand
    "Dehradun", "Haridwar", "Roorkee", "Haldwani-cum-Kathgodam", "Rudrapur", "Kashipur",
    "Rishikesh", "Kotdwara", "Ramnagar", "Muzaffarnagar", "Bageshwar", "Tehri", "Pauri",
    "Pithoragarh", "Almora", "Nainital", "Mussoorie", "Lansdowne", "Chakrata", "Dhanaulti",
    "Kanatal", "Chopta", "Auli", "Joshimath", "Badrinath", "Kedarnath", "Gangotri", "Yamunotri",
    "Hemkund Sahib", "Valley of Flowers", "Har Ki Dun", "Dayara Bugyal", "Tungnath",
    "Chandrashila", "Deoria Tal", "Chorabari Tal", "Sattal", "Bhimtal", "Naukuchiatal", "Ranikhet",
    "Kausani", "Binsar", "Mukteshwar", "Chaukori", "Berinag", "Munsiyari", "Dharchula", "Jauljibi",
    "Gangolihat", "Champawat", "Lohaghat", "Mayawati", "Abbott Mount", "Pangot", "Khurpatal",
    "Ramgarh", "Bhowali", "Okhimath",
    # West Bengal
    "Kolkata", "Howrah", "Durgapur", "Asansol", "Siliguri", "Bardhaman", "Malda", "Baharampur",
    "Habra", "Kharagpur", "Shantipur", "Dankuni", "Dhulian", "Ranaghat", "Haldia", "Raiganj",
    "Krishnanagar", "Nabadwip", "Medinipur", "Jalpaiguri", "Balurghat", "Basirhat", "Bankura",
    "Chakdaha", "Darjeeling", "Alipurduar", "Purulia", "Jangipur", "Bolpur", "Bangaon",
    "Cooch Behar", "Tamluk", "Bishnupur", "Mayurbhanj", "Diamond Harbour", "Sealdah",
    "Barrackpore", "Uttarpara Kotrung", "Serampore", "Chandannagar", "Barasat", "Kamarhati",
    "Madhyamgram", "South Dumdum", "Panihati", "North Dumdum", "Garfa", "South Barrackpur",
    "Bhatpara", "New Barrackpur", "Naihati", "Titagarh", "Halisahar", "Rishra", "Noapara",
    "Baranagar", "Dum Dum", "Rahara", "Khardaha", "New Barrackpore", "Baidyabati", "Gayeshpur",
    "Kalyani", "Haringhata", "Tehatta", "Palashi", "Karimpur", "Jalangi", "Domkal", "Jiaganj",
    "Mayurbhanj", "Lalgola", "Bhagawangola", "Murshidabad", "Beldanga", "Hariharpara", "Kandi",
    "Burwan", "Bharatpur", "Rejinagar", "Salar", "Farakka", "Jangipur", "Raghunathganj",
    "Sagardighi", "Mayurbhanj", "Lalbagh", "Panchagarh", "Raninagar", "Nawda", "Khargram",
    "Burwan", "Bhagwangola", "Raghunathganj", "Farakka", "Samserganj", "Sagardighi", "Lalgola",
    "Bhagwangola", "Mayurbhanj", "Domkal", "Jalangi", "Karimpur", "Tehatta", "Palashi", "Kalyani",
    "Haringhata", "Ranaghat", "Santipur", "Fulia", "Palashipara", "Kalyani", "Gayeshpur",
    "Baidyabati", "Bansberia", "Tribeni", "Haripal", "Tarakeswar", "Arambagh", "Goghat",
    "Khanakul", "Pursurah", "Dhaniakhali", "Balagarh", "Jirat", "Mayurbhanj", "Burdwan", "Katwa",
    "Kalna", "Memari", "Jamalpur", "Sainthia", "Rampurhat", "Nalhati", "Suri", "Bolpur",
    "Santiniketan", "Illambazar", "Rajnagar", "Dubrajpur", "Mayureswar", "Faridpur", "Jamalpur",
    "Galsi", "Manteswar", "Khandaghosh", "Raina", "Jamalpur", "Memari", "Kalna", "Katwa",
    "Ketugram", "Mangalkote", "Ausgram", "Galsi", "Purbasthali", "Bhatar", "Monteswar", "Raina",
    "Jamalpur",
]

INTERNATIONAL_CITIES: list[str] = [
    "New York", "Los Angeles", "Chicago", "Houston", "Phoenix", "Philadelphia", "San Antonio",
    "San Diego", "Dallas", "San Jose", "Austin", "Jacksonville", "San Francisco", "Columbus",
    "Indianapolis", "Fort Worth", "Charlotte", "Seattle", "Denver", "Boston", "Detroit",
    "Nashville", "Memphis", "Portland", "Oklahoma City", "Las Vegas", "Louisville", "Baltimore",
    "Milwaukee", "Albuquerque", "Tucson", "Fresno", "Sacramento", "Mesa", "Kansas City", "Atlanta",
    "Long Beach", "Colorado Springs", "Raleigh", "Miami", "Virginia Beach", "Omaha", "Oakland",
    "Minneapolis", "Tulsa", "Arlington", "Tampa", "New Orleans", "Wichita", "Cleveland",
    "Bakersfield", "London", "Paris", "Tokyo", "Sydney", "Toronto", "Berlin", "Madrid", "Rome",
    "Amsterdam", "Barcelona", "Munich", "Dubai", "Singapore", "Hong Kong", "Istanbul", "Moscow",
    "São Paulo", "Rio de Janeiro", "Buenos Aires", "Cairo", "Johannesburg", "Lagos", "Nairobi",
    "Melbourne", "Brisbane", "Auckland", "Bangkok", "Manila", "Jakarta", "Kuala Lumpur", "Seoul",
    "Taipei", "Tel Aviv", "Oslo", "Stockholm", "Copenhagen", "Helsinki", "Zurich", "Geneva",
    "Vienna", "Prague", "Warsaw", "Budapest", "Athens", "Lisbon", "Brussels", "Dublin",
    "Frankfurt", "Milan", "Venice", "Florence", "Naples", "Nice", "Lyon", "Marseille", "Vancouver",
    "Montreal", "Calgary", "Ottawa", "Mexico City", "Guadalajara", "Monterrey", "Lima", "Bogotá",
    "Santiago", "Caracas", "Quito", "La Paz", "Montevideo", "Asunción",
]
