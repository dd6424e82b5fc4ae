"""VSOP87D periodic terms for Saturn.

Heliocentric ecliptic spherical coordinates referred to the ecliptic
and equinox of the date.  Each slot ``Xn`` holds the terms multiplying
``t**n`` for coordinate ``X`` (L = longitude [rad], B = latitude [rad],
R = radius vector [AU]) as ``(A, B, C)`` rows contributing
``A * cos(B + C * t)``, with *t* in Julian millennia from J2000.

Only the powers used by the solution are listed (5731 terms in total).

References:
    P. Bretagnon & G. Francou, "Planetary theories in rectangular and
    spherical variables. VSOP87 solutions", A&A 202, 309-315 (1988).
"""

# fmt: off

L0 = (
    (0.87401354029, 0.00000000000, 0.00000000000),
    (0.11107659780, 3.96205090194, 213.29909543800),
    (0.01414150958, 4.58581515873, 7.11354700080),
    (0.00398379386, 0.52112025957, 206.18554843720),
    (0.00350769223, 3.30329903015, 426.59819087600),
    (0.00206816296, 0.24658366938, 103.09277421860),
    (0.00079271288, 3.84007078530, 220.41264243880),
    (0.00023990338, 4.66976934860, 110.20632121940),
    (0.00016573583, 0.43719123541, 419.48464387520),
    (0.00014906995, 5.76903283845, 316.39186965660),
    (0.00015820300, 0.93808953760, 632.78373931320),
    (0.00014609562, 1.56518573691, 3.93215326310),
    (0.00013160308, 4.44891180176, 14.22709400160),
    (0.00015053509, 2.71670027883, 639.89728631400),
    (0.00013005305, 5.98119067061, 11.04570026390),
    (0.00010725066, 3.12939596466, 202.25339517410),
    (0.00005863207, 0.23657028777, 529.69096509460),
    (0.00005227771, 4.20783162380, 3.18139373770),
    (0.00006126308, 1.76328499656, 277.03499374140),
    (0.00005019658, 3.17787919533, 433.71173787680),
    (0.00004592541, 0.61976424374, 199.07200143640),
    (0.00004005862, 2.24479893937, 63.73589830340),
    (0.00002953815, 0.98280385206, 95.97922721780),
    (0.00003873696, 3.22282692566, 138.51749687070),
    (0.00002461172, 2.03163631205, 735.87651353180),
    (0.00003269490, 0.77491895787, 949.17560896980),
    (0.00001758143, 3.26580514774, 522.57741809380),
    (0.00001640183, 5.50504966218, 846.08283475120),
    (0.00001391336, 4.02331978116, 323.50541665740),
    (0.00001580641, 4.37266314120, 309.27832265580),
    (0.00001123515, 2.83726793572, 415.55249061210),
    (0.00001017258, 3.71698151814, 227.52618943960),
    (0.00000848643, 3.19149825839, 209.36694217490),
    (0.00001087237, 4.18343232481, 2.44768055480),
    (0.00000956752, 0.50740889886, 1265.56747862640),
    (0.00000789205, 5.00745123149, 0.96320784650),
    (0.00000686965, 1.74714407827, 1052.26838318840),
    (0.00000654470, 1.59889331515, 0.04818410980),
    (0.00000748811, 2.14398149298, 853.19638175200),
    (0.00000633980, 2.29889903023, 412.37109687440),
    (0.00000743584, 5.25276954625, 224.34479570190),
    (0.00000852677, 3.42141350697, 175.16605980020),
    (0.00000579857, 3.09259007048, 74.78159856730),
    (0.00000624904, 0.97046831256, 210.11770170030),
    (0.00000529861, 4.44938897119, 117.31986822020),
    (0.00000542643, 1.51824320514, 9.56122755560),
    (0.00000474279, 5.47527185987, 742.99006053260),
    (0.00000448542, 1.28990416161, 127.47179660680),
    (0.00000546358, 2.12678554211, 350.33211960040),
    (0.00000478054, 2.96488054338, 137.03302416240),
    (0.00000354944, 3.01286483030, 838.96928775040),
    (0.00000451827, 1.04436664241, 490.33408917940),
    (0.00000347413, 1.53928227764, 340.77089204480),
    (0.00000343475, 0.24604039134, 0.52126486180),
    (0.00000309001, 3.49486734909, 216.48048917570),
    (0.00000322185, 0.96137456104, 203.73786788240),
    (0.00000372308, 2.27819108625, 217.23124870110),
    (0.00000321543, 2.57182354537, 647.01083331480),
    (0.00000330196, 0.24715617844, 1581.95934828300),
    (0.00000249116, 1.47010534421, 1368.66025284500),
    (0.00000286688, 2.37043745859, 351.81659230870),
    (0.00000220225, 4.20422424873, 200.76892246580),
    (0.00000277775, 0.40020408926, 211.81462272970),
    (0.00000204500, 6.01082206600, 265.98929347750),
    (0.00000207663, 0.48349820488, 1162.47470440780),
    (0.00000208655, 1.34516255304, 625.67019231240),
    (0.00000182454, 5.49122292426, 2.92076130680),
    (0.00000226609, 4.91003163138, 12.53017297220),
    (0.00000207659, 1.28302218900, 39.35687591520),
    (0.00000173914, 1.86305806814, 0.75075952540),
    (0.00000184690, 3.50344404958, 149.56319713460),
    (0.00000183511, 0.97254952728, 4.19278569400),
    (0.00000146068, 6.23102544071, 195.13984817330),
    (0.00000164541, 0.44005517520, 5.41662597140),
    (0.00000147526, 1.53529320509, 5.62907429250),
    (0.00000139666, 4.29450260069, 21.34064100240),
    (0.00000131283, 4.06828961903, 10.29494073850),
    (0.00000117283, 2.67920400584, 1155.36115740700),
    (0.00000149299, 5.73594349789, 52.69019803950),
    (0.00000122373, 1.97588777199, 4.66586644600),
    (0.00000113747, 5.59427544714, 1059.38193018920),
    (0.00000102702, 1.19748124058, 1685.05212250160),
    (0.00000118156, 5.34072933900, 554.06998748280),
    (0.00000109275, 3.43812715686, 536.80451209540),
    (0.00000110399, 0.16604024090, 1.48447270830),
    (0.00000124969, 6.27737805832, 1898.35121793960),
    (0.00000089949, 5.80392934702, 114.13847448250),
    (0.00000103956, 2.19210363069, 88.86568021700),
    (0.00000112437, 1.10502663534, 191.20769491020),
    (0.00000106570, 4.01156608514, 956.28915597060),
    (0.00000091430, 1.87521577510, 38.13303563780),
    (0.00000083791, 5.48810655641, 0.11187458460),
    (0.00000083461, 2.28972767279, 628.85158605010),
    (0.00000096987, 4.53666595763, 302.16477565500),
    (0.00000100631, 4.96513666539, 269.92144674060),
    (0.00000075491, 2.18045274099, 728.76296653100),
    (0.00000096330, 2.83319189210, 275.55052103310),
    (0.00000082363, 3.05469876064, 440.82528487760),
    (0.00000073888, 5.08914205084, 1375.77379984580),
    (0.00000071633, 5.10940743430, 65.22037101170),
    (0.00000070409, 4.86846451411, 0.21244832110),
    (0.00000069760, 3.71029022489, 14.97785352700),
    (0.00000088772, 3.86334563977, 278.51946644970),
    (0.00000068090, 0.73415460990, 1478.86657406440),
    (0.00000066501, 0.02677580336, 70.84944530420),
    (0.00000065682, 2.02165559602, 142.44965013380),
    (0.00000075765, 1.61410487792, 284.14854074220),
    (0.00000063153, 3.49493353034, 479.28838891550),
    (0.00000062539, 2.58713611532, 422.66603761290),
    (0.00000069313, 3.43979731402, 515.46387109300),
    (0.00000079021, 4.45154941586, 35.42472265210),
    (0.00000063664, 3.31749528708, 62.25142559510),
    (0.00000052939, 5.51392725227, 0.26063243090),
    (0.00000053011, 3.18480701697, 8.07675484730),
    (0.00000054492, 2.45674090515, 22.09140052780),
    (0.00000050514, 4.26749346978, 99.16062095550),
    (0.00000055170, 0.96797446150, 942.06206196900),
    (0.00000049288, 2.38641424063, 1471.75302706360),
    (0.00000047199, 2.02515248245, 312.19908396260),
    (0.00000061080, 1.50295092063, 210.85141488320),
    (0.00000045126, 0.93109376473, 2001.44399215820),
    (0.00000060556, 2.68715551585, 388.46515523820),
    (0.00000043452, 2.52602011714, 288.08069400530),
    (0.00000042544, 3.81793980322, 330.61896365820),
    (0.00000039915, 5.71378652900, 408.43894361130),
    (0.00000050145, 6.03164759907, 2214.74308759620),
    (0.00000045860, 0.54229721801, 212.33588759150),
    (0.00000054165, 0.78154835399, 191.95845443560),
    (0.00000047016, 4.59934671151, 437.64389113990),
    (0.00000042362, 1.90070070955, 430.53034413910),
    (0.00000039722, 1.63259419913, 1066.49547719000),
    (0.00000036345, 0.84756992711, 213.34727954780),
    (0.00000035468, 4.18603772925, 215.74677599280),
    (0.00000036344, 3.93295730315, 213.25091132820),
    (0.00000038005, 0.31313803095, 423.41679713830),
    (0.00000044746, 1.12488341174, 6.15033915430),
    (0.00000037902, 1.19795851115, 2.70831298570),
    (0.00000043402, 1.37363944007, 563.63121503840),
    (0.00000043764, 3.93043802956, 525.49817940060),
    (0.00000034825, 1.01566605408, 203.00415469950),
    (0.00000031755, 1.69273634405, 0.16005869440),
    (0.00000030880, 6.13525703832, 417.03696332040),
    (0.00000036388, 6.00586032647, 18.15924726470),
    (0.00000029032, 1.19660544505, 404.50679034820),
    (0.00000032812, 0.53649479713, 107.02492748170),
    (0.00000030433, 0.72335287989, 222.86032299360),
    (0.00000032644, 0.81204701486, 1795.25844372100),
    (0.00000037769, 3.69666903716, 1272.68102562720),
    (0.00000027679, 1.45663979401, 7.16173111060),
    (0.00000027187, 1.89731951902, 1045.15483618760),
    (0.00000037699, 4.51997049537, 24.37902238820),
    (0.00000034885, 4.46095761791, 214.26230328450),
    (0.00000032650, 0.66372395761, 692.58748435350),
    (0.00000030324, 5.30369950147, 33.94024994380),
    (0.00000027480, 6.22702216249, 1.27202438720),
    (0.00000026657, 4.56713198392, 7.06536289100),
    (0.00000031745, 5.49798599565, 56.62235130260),
    (0.00000028050, 5.64447420566, 128.95626931510),
    (0.00000024277, 3.93966553574, 414.06801790380),
    (0.00000032017, 5.22260660455, 92.04707395470),
    (0.00000026976, 0.06705123981, 205.22234059070),
    (0.00000022974, 3.65817751770, 207.67002114550),
    (0.00000031775, 5.59198119173, 6069.77675455340),
    (0.00000023153, 2.10054506119, 1788.14489672020),
    (0.00000031025, 0.37190053329, 703.63318461740),
    (0.00000029376, 0.14742155778, 131.40394986990),
    (0.00000022562, 5.24009182383, 212.77783057620),
    (0.00000026185, 5.41311252822, 140.00196957900),
    (0.00000025673, 4.36038885283, 32.24332891440),
    (0.00000020392, 2.82413909260, 429.77958461370),
    (0.00000020659, 0.67091805084, 2317.83586181480),
    (0.00000024397, 3.08740396398, 145.63104387150),
    (0.00000023735, 2.54365387567, 76.26607127560),
    (0.00000020157, 5.06708675157, 617.80588578620),
    (0.00000023307, 3.97357729211, 483.22054217860),
    (0.00000022878, 6.10452832642, 177.87437278590),
    (0.00000022978, 3.20140795404, 208.63322899200),
    (0.00000020638, 5.22128727027, 6.59228213900),
    (0.00000021446, 0.72034565528, 1258.45393162560),
    (0.00000018034, 6.11382719947, 210.37833413120),
    (0.00000022380, 5.92299908546, 173.94221952280),
    (0.00000019128, 5.77772013766, 213.82036029980),
    (0.00000020871, 5.79126331864, 2531.13495725280),
    (0.00000019327, 1.64147367403, 565.11568774670),
    (0.00000016806, 3.27953583323, 98.89998852460),
    (0.00000020833, 2.01655935909, 860.30992875280),
    (0.00000017939, 3.14329498012, 831.85574074960),
    (0.00000015653, 3.10137669623, 106.27416795630),
    (0.00000018235, 5.22595172482, 73.29712585900),
    (0.00000019302, 5.93947114050, 425.11371816770),
    (0.00000014514, 2.75049388379, 1.22384027740),
    (0.00000014562, 5.18795088579, 305.34616939270),
    (0.00000014254, 3.88079504939, 54.17467074780),
    (0.00000014594, 3.25016810034, 78.71375183040),
    (0.00000013637, 2.55486219141, 405.25754987360),
    (0.00000013914, 1.72356993808, 69.15252427480),
    (0.00000013689, 2.37430586272, 125.98732389850),
    (0.00000013496, 0.82683590985, 99.91138048090),
    (0.00000018483, 0.73171264866, 9999.98645077300),
    (0.00000013542, 3.58584380924, 234.63973644040),
    (0.00000013741, 6.18458356845, 245.54242435240),
    (0.00000016944, 0.72200792996, 2111.65031337760),
    (0.00000017441, 0.23803796878, 134.58534360760),
    (0.00000014181, 4.51963935804, 59.80374504030),
    (0.00000013598, 2.53776983965, 1.69692102940),
    (0.00000012240, 2.11973445754, 28.31117565130),
    (0.00000011988, 1.62114832786, 1361.54670584420),
    (0.00000011974, 4.07378735120, 280.96714700450),
    (0.00000012758, 5.31146919749, 344.70304530790),
    (0.00000016051, 3.97093160336, 355.74874557180),
    (0.00000011427, 5.51123470805, 192.69216761850),
    (0.00000013133, 4.69168003518, 767.36908292080),
    (0.00000014746, 3.28998910617, 1589.07289528380),
    (0.00000011417, 1.81615681635, 2104.53676637680),
    (0.00000011626, 2.79410384978, 362.86229257260),
    (0.00000013234, 4.16642914717, 225.82926841020),
    (0.00000010599, 5.50554288376, 199.28444975750),
    (0.00000010558, 3.57501718639, 1.43628859850),
    (0.00000010485, 2.84462532686, 85.82729883120),
    (0.00000010296, 0.22225264071, 198.32124191100),
    (0.00000010552, 0.18716643576, 217.49188113200),
    (0.00000011853, 0.11584857323, 7.63481186260),
    (0.00000010248, 0.21904154170, 144.14657116320),
    (0.00000010403, 1.68776321208, 31.01948863700),
    (0.00000010313, 4.72132701805, 216.21985674480),
    (0.00000010719, 2.60869377832, 339.28641933650),
    (0.00000009636, 3.66746262954, 212.54833591260),
    (0.00000009631, 3.34275630477, 223.59403617650),
    (0.00000009684, 0.41556436593, 2634.22773147140),
    (0.00000009885, 4.01798130416, 207.14875628370),
    (0.00000013212, 6.00683506785, 214.78356814630),
    (0.00000011346, 2.61898383052, 7.86430652620),
    (0.00000009158, 5.39855118256, 342.25536475310),
    (0.00000011882, 4.00188476744, 267.47376618580),
    (0.00000012054, 3.59904816676, 124.43341522100),
    (0.00000008921, 4.22716773496, 6.36278747540),
    (0.00000010142, 3.60807025662, 14.01464568050),
    (0.00000009350, 0.72255756005, 347.88443904560),
    (0.00000010529, 2.36779614951, 831.10498122420),
    (0.00000008587, 4.48439552745, 1692.16566950240),
    (0.00000010142, 3.93620624488, 207.88246946660),
    (0.00000009147, 4.28032835242, 312.45971639350),
    (0.00000008088, 0.81225752596, 264.50482076920),
    (0.00000009241, 4.26402650779, 20.60692781950),
    (0.00000009614, 0.64291347187, 218.92816973050),
    (0.00000008537, 0.48756672382, 1574.84580128220),
    (0.00000007986, 4.71088791079, 333.65734504400),
    (0.00000008951, 0.90641577433, 497.44763618020),
    (0.00000007959, 2.73277594136, 4.14460158420),
    (0.00000009133, 5.08250578843, 241.61027108930),
    (0.00000009669, 1.60623316904, 0.89377187730),
    (0.00000008883, 5.55491009279, 2847.52682690940),
    (0.00000008926, 5.80857835271, 329.72519178090),
    (0.00000007226, 0.60164771281, 206.23373254700),
    (0.00000007655, 5.53676341721, 116.42609634290),
    (0.00000007118, 0.18747501525, 209.10630974400),
    (0.00000007507, 5.43555636173, 621.73803904930),
    (0.00000008885, 5.36210591059, 343.21857259960),
    (0.00000007056, 0.41911130648, 756.32338265690),
    (0.00000008124, 4.05571025939, 237.67811782620),
    (0.00000008964, 1.65023927130, 210.33015002140),
    (0.00000006961, 3.17855200943, 543.02428721890),
    (0.00000008916, 0.56503620503, 2428.04218303420),
    (0.00000006926, 3.66869171435, 247.23934538180),
    (0.00000008982, 4.25046722481, 46.47042291600),
    (0.00000007089, 5.14399672225, 231.45834270270),
    (0.00000007381, 1.25092810119, 217.96496188400),
    (0.00000007134, 2.83090354854, 1148.24761040620),
    (0.00000006353, 0.82582711056, 31.49256938900),
    (0.00000007558, 5.62617378543, 518.64526483070),
    (0.00000006383, 3.54809945181, 244.31858407500),
    (0.00000006914, 3.70012837706, 206.13736432740),
    (0.00000006286, 5.79144749096, 179.35884549420),
    (0.00000006639, 4.55197585824, 120.35824960600),
    (0.00000005823, 1.40737990571, 214.04985496340),
    (0.00000005850, 4.86725483749, 320.32402291970),
    (0.00000006213, 1.07959478499, 251.43213107580),
    (0.00000007730, 3.82244175824, 380.12776796000),
    (0.00000005716, 1.34909972549, 1677.93857550080),
    (0.00000006469, 1.34776801494, 188.92007304980),
    (0.00000005668, 2.28643368177, 20.44686912510),
    (0.00000006092, 3.62275289839, 1169.58825140860),
    (0.00000005711, 0.51687421521, 148.07872442630),
    (0.00000005804, 1.54831552984, 2420.92863603340),
    (0.00000005703, 5.05993483230, 2.96894541660),
    (0.00000005913, 1.66225477547, 842.15068148810),
    (0.00000007449, 1.36195943673, 166.82867252200),
    (0.00000006482, 1.94032041024, 357.44566660120),
    (0.00000006368, 2.44556930837, 654.12438031560),
    (0.00000006327, 0.40654591365, 168.05251279940),
    (0.00000005573, 2.69383455663, 750.10360753340),
    (0.00000007216, 2.22547711392, 488.84961647110),
    (0.00000006701, 6.03737590382, 160.60889739850),
    (0.00000006938, 5.78362034410, 700.66423920080),
    (0.00000006701, 3.14738404371, 491.81856188770),
    (0.00000005684, 2.59531540359, 1.64453140270),
    (0.00000004900, 2.03902856851, 0.80314915210),
    (0.00000005147, 4.10182033298, 196.62432088160),
    (0.00000004985, 2.96765983996, 258.87574647670),
    (0.00000005911, 1.81507526918, 252.65597135320),
    (0.00000006056, 3.33431010543, 182.27960680100),
    (0.00000006195, 5.01900871714, 273.10284047830),
    (0.00000006316, 5.49053160191, 206.70681329900),
    (0.00000005529, 3.31498938717, 1905.46476494040),
    (0.00000005102, 3.98171453610, 254.94359321360),
    (0.00000004762, 2.24463685255, 635.96513305090),
    (0.00000005213, 0.53609344278, 135.54855145410),
    (0.00000004639, 0.04466373027, 213.18722085340),
    (0.00000005951, 0.54565487490, 51.20572533120),
    (0.00000004535, 0.16088614438, 2950.61960112800),
    (0.00000004639, 4.73769153591, 213.41097002260),
    (0.00000004716, 3.13636467789, 28.57180808220),
    (0.00000004748, 1.12156952989, 6.21977512350),
    (0.00000005735, 0.04425142145, 348.84764689210),
    (0.00000004334, 2.68814219154, 81.75213321620),
    (0.00000004538, 3.83676888638, 487.36514376280),
    (0.00000005582, 3.63486861028, 248.72381809010),
    (0.00000004106, 3.39164360376, 50.40257617910),
    (0.00000005657, 3.59967787362, 282.45161971280),
    (0.00000005145, 1.33329458239, 173.68158709190),
    (0.00000003898, 4.11804949361, 213.51154375910),
    (0.00000003898, 0.66430577257, 213.08664711690),
    (0.00000004418, 0.10784811796, 905.88657979150),
    (0.00000004935, 2.19060382431, 189.72322220190),
    (0.00000003799, 2.60752583205, 546.95644048200),
    (0.00000003960, 1.60339889010, 218.71572140940),
    (0.00000003740, 3.30724497407, 274.06604832480),
    (0.00000003778, 0.26606330942, 636.71589257630),
    (0.00000004657, 0.37532078548, 2744.43405269080),
    (0.00000003682, 5.11587898667, 458.84151979040),
    (0.00000004230, 5.18313062329, 27.08733537390),
    (0.00000005181, 3.75590784411, 3127.31333126180),
    (0.00000003904, 2.21738744557, 358.93013930950),
    (0.00000004784, 4.60666675927, 72.07328558160),
    (0.00000003552, 3.23789349146, 543.91805909620),
    (0.00000003502, 3.68869576093, 41.64449777560),
    (0.00000004803, 4.73553427126, 240.38643081190),
    (0.00000003768, 3.86077796242, 2008.55753915900),
    (0.00000003680, 5.36657425183, 10.03430830760),
    (0.00000004298, 3.15595944154, 738.79727483860),
    (0.00000003388, 0.73176365772, 11.30633269480),
    (0.00000003507, 2.62508475661, 13.33332212430),
    (0.00000003552, 0.28967392251, 1891.23767093880),
    (0.00000003604, 4.69324090480, 295.05122865420),
    (0.00000003621, 6.25264336426, 129.91947716160),
    (0.00000003334, 5.04221806054, 153.49535039770),
    (0.00000003837, 5.31732096284, 3163.91869656600),
    (0.00000003281, 5.59031570352, 2.00573757010),
    (0.00000004042, 2.37081308090, 176.65053250850),
    (0.00000003500, 2.54744268360, 1464.63948006280),
    (0.00000004144, 5.46982520458, 6.90109867970),
    (0.00000003691, 4.07518441665, 969.62247809490),
    (0.00000003947, 4.27108449197, 181.80652604900),
    (0.00000003867, 5.48643386310, 37.87240320690),
    (0.00000003339, 6.05372370584, 9.40116886120),
    (0.00000003484, 5.81097824751, 13.49338081870),
    (0.00000003033, 2.38897886651, 221.37585028530),
    (0.00000002990, 4.13995939326, 66.70484372000),
    (0.00000003746, 5.29902286106, 561.18353448360),
    (0.00000003233, 4.27743802321, 593.42686339800),
    (0.00000003170, 1.75400477770, 235.39049596580),
    (0.00000004114, 2.01006788412, 601.76425067620),
    (0.00000002937, 4.76351448561, 213.55972786890),
    (0.00000002932, 1.83671373509, 501.37978944330),
    (0.00000002937, 0.01884528825, 213.03846300710),
    (0.00000003268, 4.44653949711, 60.76695288680),
    (0.00000003608, 0.14307251176, 552.58551477450),
    (0.00000002947, 0.74753671556, 17.52610781830),
    (0.00000003979, 0.76931722276, 424.15051032120),
    (0.00000002803, 1.07518176128, 1994.33044515740),
    (0.00000002905, 1.27201007426, 2737.32050569000),
    (0.00000003610, 0.22394084000, 121.25202148330),
    (0.00000002846, 5.11748545179, 205.66428357540),
    (0.00000003156, 2.74955723696, 494.26624244250),
    (0.00000003576, 4.49826302447, 167.08930495290),
    (0.00000002746, 0.66908290712, 7.00167241620),
    (0.00000002780, 2.10066625279, 894.84087952760),
    (0.00000002875, 2.39009721774, 151.04766984290),
    (0.00000003020, 0.25475826890, 40.84134862350),
    (0.00000002731, 3.74814908509, 429.04587143080),
    (0.00000002793, 4.17938837230, 292.01284726840),
    (0.00000002706, 5.34438894925, 327.43756992050),
    (0.00000002965, 0.61653881148, 643.82943957710),
    (0.00000002616, 4.81901387560, 681.54178408960),
    (0.00000002548, 3.78162580820, 1485.98012106520),
    (0.00000003483, 5.76091147029, 141.22580985640),
    (0.00000003257, 0.75722680616, 555.55446019110),
    (0.00000002887, 6.15899159727, 425.63498302950),
    (0.00000002450, 1.29619859767, 193.65537546500),
    (0.00000003401, 2.48137843009, 43.28902917830),
    (0.00000003208, 0.66002842340, 776.93031047640),
    (0.00000002435, 4.58097103726, 477.80391620720),
    (0.00000002577, 1.41538858001, 100.64509366380),
    (0.00000002600, 3.73139519973, 17.40848773930),
    (0.00000002428, 1.04400815278, 1279.79457262800),
    (0.00000002569, 5.36004101928, 7.22542158540),
    (0.00000002844, 2.47228767650, 280.00393915800),
    (0.00000002847, 1.52706408796, 17.26547538740),
    (0.00000002461, 2.73899140465, 172.24529849340),
    (0.00000003228, 4.10258705369, 618.55664531160),
    (0.00000002288, 0.18365494079, 426.64637498580),
    (0.00000002952, 3.97748947007, 650.94298657790),
    (0.00000002653, 0.14255829255, 162.89651925890),
    (0.00000002291, 3.26940117011, 426.55000676620),
    (0.00000003118, 2.80941831445, 2221.85663459700),
    (0.00000002343, 4.24349768377, 113.38771495710),
    (0.00000002780, 4.36271946528, 130.44074202340),
    (0.00000002539, 5.58396427573, 381.35160823740),
    (0.00000002673, 2.74210116623, 45.57665103870),
    (0.00000003017, 3.72208070740, 228.27694896500),
    (0.00000002781, 0.36312756349, 8.59801970910),
    (0.00000002377, 4.49193242045, 25.12978191360),
    (0.00000002140, 5.43424670725, 630.33605875840),
    (0.00000002456, 1.71617205116, 313.68355667090),
    (0.00000002071, 2.40453395841, 16.46232623530),
    (0.00000002050, 6.19704773331, 3267.01147078460),
    (0.00000002764, 0.40107063007, 219.44943459230),
    (0.00000002307, 2.61462153778, 26.82670294300),
    (0.00000002650, 0.05892373791, 5856.47765911540),
    (0.00000001974, 2.15890150781, 746.92221379570),
    (0.00000001949, 3.13157993205, 226.63241756230),
    (0.00000002063, 0.75916097286, 472.17484191470),
    (0.00000002172, 1.41622302638, 23.57587323610),
    (0.00000002378, 3.45446288811, 241.87090352020),
    (0.00000002314, 2.92766120608, 170.76082578510),
    (0.00000002409, 1.55291842382, 112.65400177420),
    (0.00000002092, 4.33481587531, 210.59078245230),
    (0.00000001883, 4.75777119721, 115.62294719080),
    (0.00000001963, 5.63940648232, 454.90936652730),
    (0.00000001871, 2.14579836453, 135.33610313300),
    (0.00000002304, 0.11816226543, 3060.82592234740),
    (0.00000002221, 4.34506511014, 556.51766803760),
    (0.00000001867, 5.70943358261, 19.12245511120),
    (0.00000002269, 3.36100653157, 696.51963761660),
    (0.00000002127, 0.44754929310, 216.00740842370),
    (0.00000001807, 6.15427316170, 5.84152261360),
    (0.00000002213, 3.42223891884, 533.62311835770),
    (0.00000001866, 3.90535444843, 220.36445832900),
    (0.00000001767, 0.94232357739, 213.45915413240),
    (0.00000001767, 3.84003619647, 213.13903674360),
    (0.00000001910, 3.72504487558, 104.05598206510),
    (0.00000001750, 0.82378244287, 220.46082654860),
    (0.00000001838, 0.06310147657, 436.15941843160),
    (0.00000002146, 4.41415180481, 184.09414790940),
    (0.00000001730, 2.21039276178, 416.30325013750),
    (0.00000001715, 0.26601715797, 103.14095832840),
    (0.00000001710, 0.63515407580, 181.05576652360),
    (0.00000002307, 3.29544714308, 569.04784100980),
    (0.00000001906, 5.30639447218, 405.99126305650),
    (0.00000001863, 4.68613642432, 286.59622129700),
    (0.00000001873, 2.26516020863, 1781.03134971940),
    (0.00000002035, 3.85188859267, 672.14061522840),
    (0.00000002236, 3.01959133214, 105.54045477340),
    (0.00000001767, 1.45800271562, 16.67477455640),
    (0.00000001633, 0.16030477876, 18.91000679010),
    (0.00000002116, 2.90186702031, 486.40193591630),
    (0.00000002202, 3.88125957017, 427.56139872250),
    (0.00000001706, 3.35213628354, 103.04459010880),
    (0.00000001604, 2.48973273967, 55.65914345610),
    (0.00000001744, 1.83791106739, 1044.40407666220),
    (0.00000001569, 6.10089581118, 106.01353552540),
    (0.00000002081, 6.03810192844, 916.93228005540),
    (0.00000001799, 5.01592570405, 731.94436026870),
    (0.00000001737, 1.49651330833, 25.86349509650),
    (0.00000001695, 3.53314158403, 627.36711334180),
    (0.00000001543, 0.81384993001, 2310.72231481400),
    (0.00000001896, 3.38169845451, 2324.94940881560),
    (0.00000001926, 4.66519027283, 353.30106501700),
    (0.00000001765, 5.14740716994, 107.28555991260),
    (0.00000001556, 1.12431826916, 230.82520325630),
    (0.00000001843, 0.02435960281, 102.12956637210),
    (0.00000001501, 4.18415120927, 194.17664032680),
    (0.00000001528, 1.00328674046, 3053.71237534660),
    (0.00000001529, 5.58893570479, 212.02707105080),
    (0.00000001684, 5.08547245125, 3480.31056622260),
    (0.00000001461, 2.31020597821, 721.64941953020),
    (0.00000001480, 5.34331643017, 418.52143602870),
    (0.00000001601, 5.53623000915, 391.17346822390),
    (0.00000001893, 3.62340803433, 204.70107572890),
    (0.00000001529, 6.06535432009, 77.96299230500),
    (0.00000001529, 5.47660937625, 214.57111982520),
    (0.00000001552, 2.06693539836, 36.64856292950),
    (0.00000001453, 6.04709831442, 165.60483224460),
    (0.00000001393, 2.28253369060, 403.02231763990),
    (0.00000001444, 2.90650214018, 447.93883187840),
    (0.00000001924, 1.37028714759, 468.24268865160),
    (0.00000001426, 0.13255011458, 2207.62954059540),
    (0.00000001389, 2.21739183113, 643.07868005170),
    (0.00000001365, 1.63853880518, 629.60234557550),
    (0.00000001362, 3.35131049142, 93.53154666300),
    (0.00000001376, 5.36989538450, 180.16199464630),
    (0.00000001584, 0.85642767335, 271.40591944890),
    (0.00000001405, 5.69231057947, 25.27279426550),
    (0.00000001681, 5.30308110734, 835.03713448730),
    (0.00000001598, 3.04233449432, 42.53826965290),
    (0.00000001759, 3.59043066940, 508.35032409220),
    (0.00000001394, 4.55070863290, 426.07692601420),
    (0.00000001314, 1.81147178081, 1382.88734684660),
    (0.00000001281, 4.26508388040, 123.53964334370),
    (0.00000001742, 5.71133189432, 22.89454967990),
    (0.00000001483, 1.84687831602, 289.56516671360),
    (0.00000001257, 3.01131200921, 409.92341631960),
    (0.00000001285, 4.41168551011, 558.00214074590),
    (0.00000001355, 3.87115897452, 1802.37199072180),
    (0.00000001333, 0.08474224795, 411.62033734900),
    (0.00000001235, 4.08060394635, 28.45418800320),
    (0.00000001373, 5.06955106471, 427.11945573780),
    (0.00000001565, 2.32953532704, 41.05379694460),
    (0.00000001656, 6.06169130804, 268.43697403230),
    (0.00000001212, 3.05966957556, 420.96911658350),
    (0.00000001238, 5.25936700679, 412.58354519550),
    (0.00000001220, 3.92987038126, 2.66012887590),
    (0.00000001552, 1.48184004773, 9786.68735533500),
    (0.00000001240, 1.46716327302, 291.26208774300),
    (0.00000001133, 5.39046583617, 423.67742956920),
    (0.00000001319, 5.79905891015, 1108.13997496560),
    (0.00000001329, 0.92291650117, 778.41478318470),
    (0.00000001399, 2.55906860098, 421.93232443000),
    (0.00000001120, 3.86777259232, 1033.35837639830),
    (0.00000001164, 4.10048660918, 685.47393735270),
    (0.00000001321, 1.45843550806, 1073.60902419080),
    (0.00000001313, 0.11761534168, 71.81265315070),
    (0.00000001438, 2.57741975416, 100.38446123290),
    (0.00000001190, 5.63379509659, 5.10780943070),
    (0.00000001289, 5.20604565993, 278.25883401880),
    (0.00000001157, 5.00101860101, 230.56457082540),
    (0.00000001233, 2.70207317014, 282.66406803390),
    (0.00000001209, 4.02230498135, 980.66817835880),
    (0.00000001070, 5.17569455055, 313.21047591890),
    (0.00000001292, 4.30946655209, 219.89137757700),
    (0.00000001399, 2.58476795858, 2538.24850425360),
    (0.00000001038, 0.14212199680, 820.05928096030),
    (0.00000001245, 4.08278897130, 525.75881183150),
    (0.00000001254, 2.46275017735, 457.61767951300),
    (0.00000001021, 1.11239421009, 69.36497259590),
    (0.00000001009, 1.01709171385, 143.93412284210),
    (0.00000001075, 2.39196853318, 48.75804477640),
    (0.00000001180, 6.18938910429, 3377.21779200400),
    (0.00000000989, 5.94928603657, 3583.40334044120),
    (0.00000000972, 4.25434114756, 397.39324334740),
    (0.00000000983, 0.04442608551, 140.96517742550),
    (0.00000000972, 5.67683107883, 422.40540518200),
    (0.00000001298, 1.34524469231, 875.83029900100),
    (0.00000001190, 0.67933974618, 699.70103135430),
    (0.00000000950, 2.66964340700, 92.30770638560),
    (0.00000000933, 0.63000656580, 406.95447090300),
    (0.00000000959, 1.77556884452, 67.66805156650),
    (0.00000001185, 3.70140604185, 285.63301345050),
    (0.00000000956, 5.18928530992, 319.31263096340),
    (0.00000001014, 1.97449310063, 2097.42321937600),
    (0.00000001048, 3.69659410655, 117.91056905120),
    (0.00000001153, 2.53320305623, 104.57724692690),
    (0.00000001258, 2.51536062507, 694.07195706180),
    (0.00000000971, 5.19147635849, 240.12579838100),
    (0.00000000940, 3.94701776697, 35.21227433100),
    (0.00000001047, 6.12360979460, 238.90195810360),
    (0.00000001185, 5.28289734361, 638.41281360570),
    (0.00000000893, 0.95364488395, 14.81779483260),
    (0.00000001094, 3.93009679240, 945.24345570670),
    (0.00000000949, 3.46451925897, 443.86366626340),
    (0.00000001002, 3.18639902867, 337.73251065900),
    (0.00000001017, 2.87111101661, 211.60217440860),
    (0.00000000875, 0.58638080067, 2.28762186040),
    (0.00000000925, 1.54981519784, 19.64371997300),
    (0.00000001152, 1.68528608590, 691.10301164520),
    (0.00000000832, 2.64637256467, 436.89313161450),
    (0.00000000834, 3.88913521570, 331.20966448920),
    (0.00000000825, 2.15437872210, 739.80866679490),
    (0.00000000848, 3.18263239100, 196.03362005060),
    (0.00000001044, 3.87842686803, 532.61172640140),
    (0.00000000846, 5.38853773752, 97.67614824720),
    (0.00000001021, 2.93075488512, 184.98791978670),
    (0.00000000843, 6.12012061227, 616.32141307790),
    (0.00000000820, 1.01380400969, 480.77286162380),
    (0.00000000842, 3.56523575381, 421.18156490460),
    (0.00000001076, 3.28234305253, 5.67725840230),
    (0.00000000808, 2.78227865672, 212.07525516060),
    (0.00000000812, 0.94281737163, 108.72184851110),
    (0.00000000808, 2.21202653278, 610.69233878540),
    (0.00000000808, 2.00008111713, 214.52293571540),
    (0.00000000875, 2.14897461363, 114.39910691340),
    (0.00000000791, 2.35474255596, 1.37259812370),
    (0.00000000960, 0.25496742364, 710.74673161820),
    (0.00000001001, 2.34471240227, 16.04163511000),
    (0.00000000994, 0.63700664871, 84.93352695390),
    (0.00000000985, 2.63664920104, 395.57870223900),
    (0.00000000874, 2.59112594967, 418.00017116690),
    (0.00000000758, 0.58117487362, 2627.11418447060),
    (0.00000000894, 1.48976897396, 760.25553592000),
    (0.00000000768, 5.25095392845, 305.08553696180),
    (0.00000001020, 2.73153988233, 268.95823889410),
    (0.00000000903, 0.13224671457, 238.42887735160),
    (0.00000000750, 0.76128043194, 724.83081326790),
    (0.00000000903, 3.37105323370, 526.50957135690),
    (0.00000000930, 2.83622594110, 2641.34127847220),
    (0.00000000808, 5.23759255053, 216.26804085460),
    (0.00000000864, 1.22059443823, 570.74476203920),
    (0.00000000798, 3.72388187653, 124.50285119020),
    (0.00000000753, 0.72747041757, 3370.10424500320),
    (0.00000000844, 2.03251767810, 511.53171782990),
    (0.00000000827, 4.49936223096, 444.75743814070),
    (0.00000000848, 3.74330244183, 2118.76386037840),
    (0.00000000795, 0.27939057139, 101.86893394120),
    (0.00000000754, 5.68583497533, 662.53120356300),
    (0.00000000750, 4.78778128003, 102.57150935680),
    (0.00000000709, 1.64518562815, 159.12442469020),
    (0.00000000770, 4.02404991950, 909.81873305460),
    (0.00000000765, 1.62693133597, 465.95506679120),
    (0.00000000911, 5.04635658282, 913.96333463880),
    (0.00000000861, 2.78971410809, 495.75071515080),
    (0.00000000688, 1.10207467005, 1.53686233500),
    (0.00000000803, 4.33043919090, 453.42489381900),
    (0.00000000673, 0.03439333853, 2524.02141025200),
    (0.00000000856, 3.50639182375, 439.12836384820),
    (0.00000000684, 3.93906807606, 337.80194662820),
    (0.00000000716, 6.18909854987, 310.71461125430),
    (0.00000000922, 1.70634200320, 125.18417474640),
    (0.00000000885, 1.69955870744, 6283.07584999140),
    (0.00000000656, 1.28102954508, 432.01481684740),
    (0.00000000808, 1.64410808383, 299.12639426920),
    (0.00000000656, 1.49449164620, 849.26422848890),
    (0.00000000679, 4.02962984490, 429.51895218280),
    (0.00000000854, 3.04068731741, 298.23262239190),
    (0.00000000676, 2.17631477883, 576.16138801060),
    (0.00000000881, 5.47733557925, 220.93390730060),
    (0.00000000739, 5.85330901725, 938.12990870590),
    (0.00000000637, 2.96294462433, 425.84743135060),
    (0.00000000665, 1.62998758015, 221.16340196420),
    (0.00000000693, 3.53871697600, 1182.92157353290),
    (0.00000000659, 1.85319023888, 72.33391801250),
    (0.00000000631, 2.01234919422, 58.10682401090),
    (0.00000000806, 5.21763933753, 428.08266358430),
    (0.00000000804, 5.94281804567, 26.02355379090),
    (0.00000000679, 2.11784460940, 256.42806592190),
    (0.00000000692, 1.88791537515, 214.99601646740),
    (0.00000000731, 1.95762888351, 19.01058052660),
    (0.00000000786, 0.91252523635, 518.38463239980),
    (0.00000000684, 4.89288171806, 3796.70243587920),
    (0.00000000612, 2.08511492036, 1038.04128918680),
    (0.00000000598, 3.48814927085, 219.66188291340),
    (0.00000000828, 0.31689472200, 25.60286266560),
    (0.00000000773, 4.57524006328, 624.91943278700),
    (0.00000000775, 6.12920077021, 432.22726516850),
    (0.00000000820, 4.11320326130, 141.48644228730),
    (0.00000000588, 1.95775535412, 211.86280683950),
    (0.00000000661, 5.30100397707, 103.61403908040),
    (0.00000000588, 2.82460441973, 214.73538403650),
    (0.00000000651, 5.56732715834, 393.46109008430),
    (0.00000000564, 4.01666572198, 850.01498801430),
    (0.00000000657, 2.58166087726, 526.98265210890),
    (0.00000000722, 0.68494219480, 953.10776223290),
    (0.00000000592, 2.37190662490, 205.43478891180),
    (0.00000000738, 1.07981019512, 239.16259053450),
    (0.00000000590, 6.03587790219, 188.02630117250),
    (0.00000000559, 5.76010635813, 430.79097657000),
    (0.00000000535, 5.80499883199, 100.17201291180),
    (0.00000000611, 5.95439360100, 3693.60966166060),
    (0.00000000591, 4.22379888536, 505.31194270640),
    (0.00000000691, 2.96568305933, 606.76018552230),
    (0.00000000648, 2.33387623043, 30.75885620610),
    (0.00000000544, 2.21686115865, 92.79783348010),
    (0.00000000517, 2.68282421083, 262.05714021440),
    (0.00000000563, 1.69735688719, 2413.81508903260),
    (0.00000000569, 2.85075508949, 227.31374111850),
    (0.00000000531, 2.17713708433, 263.02034806090),
    (0.00000000504, 4.44947885193, 343.73983746140),
    (0.00000000578, 3.31462999801, 33.72780162270),
    (0.00000000619, 1.83409636127, 867.42347575360),
    (0.00000000546, 4.82201187196, 1048.33622992530),
    (0.00000000517, 1.42016110098, 1246.65747183630),
    (0.00000000681, 1.94124532036, 25874.60404613620),
    (0.00000000551, 5.70617358907, 1119.18567522950),
    (0.00000000523, 5.78878978812, 366.79444583570),
    (0.00000000486, 1.90063955671, 1063.31408345230),
    (0.00000000552, 3.64325031166, 256.58812461630),
    (0.00000000612, 2.39349965241, 2854.64037391020),
    (0.00000000495, 3.46833581240, 597.35901666110),
    (0.00000000622, 1.86539391351, 524.01370669230),
    (0.00000000480, 5.33557742428, 29.20494752860),
    (0.00000000492, 4.64109549618, 384.05992122310),
    (0.00000000520, 2.32171681836, 2957.73314812880),
    (0.00000000545, 0.53274778710, 431.26405732200),
    (0.00000000479, 2.13325177240, 319.57326339430),
    (0.00000000526, 4.17771910249, 136.06981631590),
    (0.00000000612, 4.56148986681, 774.48262992160),
    (0.00000000642, 3.25195912708, 67.88049988760),
    (0.00000000527, 4.00299045889, 2435.15573003500),
    (0.00000000524, 4.69817741494, 336.83873878170),
    (0.00000000495, 5.95703962647, 765.88461021250),
    (0.00000000463, 6.09780322600, 54.33472944220),
    (0.00000000538, 0.22116216124, 450.97721326420),
    (0.00000000465, 1.87487942848, 958.57677783100),
    (0.00000000500, 1.54084756342, 572.22923474750),
    (0.00000000528, 3.54764543325, 233.90602325750),
    (0.00000000451, 5.72664397006, 3899.79521009780),
    (0.00000000514, 5.00509609437, 273.85360000370),
    (0.00000000471, 2.96871670899, 306.83064210100),
    (0.00000000447, 1.87279400375, 62.03897727400),
    (0.00000000456, 5.45521998520, 1171.87587326900),
    (0.00000000499, 1.92821778530, 217.44369702220),
    (0.00000000548, 3.21873307934, 824.74219374880),
    (0.00000000579, 2.29424247924, 810.65811209910),
    (0.00000000550, 0.67875196590, 315.16802937920),
    (0.00000000556, 1.30277646899, 133.10087089930),
    (0.00000000449, 6.05954557724, 141.69889060840),
    (0.00000000447, 5.83737433218, 823.99143422340),
    (0.00000000517, 3.62832879827, 934.94851496820),
    (0.00000000482, 1.04855231956, 1055.44977692610),
    (0.00000000482, 4.07207792722, 195.89060769870),
    (0.00000000428, 0.65142455407, 427.34895040140),
    (0.00000000585, 5.48406138684, 376.19561469690),
    (0.00000000469, 3.87344294455, 320.58465535060),
    (0.00000000488, 2.83523964260, 460.53844081980),
    (0.00000000450, 4.30419652064, 88.11492069160),
    (0.00000000537, 0.85582040238, 214.19286731530),
    (0.00000000438, 1.32216133929, 963.40270297140),
    (0.00000000560, 2.50374228728, 952.09637027660),
    (0.00000000442, 2.80002649649, 209.15449385380),
    (0.00000000443, 4.31062007978, 9992.87290377220),
    (0.00000000469, 0.45235276525, 464.73122651380),
    (0.00000000488, 0.35817443686, 36.90919536040),
    (0.00000000418, 4.81080887468, 775.23338944700),
    (0.00000000417, 4.93943593579, 306.09692891810),
    (0.00000000483, 3.92847922420, 39.61750834610),
    (0.00000000467, 1.89153069484, 30.05628079050),
    (0.00000000410, 5.52148731635, 118.07062774560),
    (0.00000000406, 1.35991757653, 945.99421523210),
    (0.00000000446, 4.06656112480, 380.38840039090),
    (0.00000000466, 3.65954736664, 988.53248488500),
    (0.00000000418, 1.40185532806, 313.94418910180),
    (0.00000000481, 1.80873987903, 43.12897048390),
    (0.00000000437, 0.86746182155, 170.97327410620),
    (0.00000000483, 4.49894122772, 46.20979048510),
    (0.00000000398, 2.90977731924, 131.54696222180),
    (0.00000000529, 3.74604329884, 699.17976649250),
    (0.00000000396, 0.34033987778, 2943.50605412720),
    (0.00000000545, 2.97400965609, 305.60680182360),
    (0.00000000412, 3.81935995126, 84.34282612290),
    (0.00000000425, 2.60672101181, 121.84272231430),
    (0.00000000474, 2.41769418569, 838.21852822500),
    (0.00000000457, 1.27246488727, 107.75864066460),
    (0.00000000519, 3.12247974037, 10213.28554621100),
    (0.00000000495, 4.63705386984, 301.41401612960),
    (0.00000000537, 3.92653937147, 212.40532356070),
    (0.00000000385, 3.33476325050, 806.72595883600),
    (0.00000000477, 1.66001855277, 175.42669223110),
    (0.00000000378, 0.47722247042, 200.55647414470),
    (0.00000000459, 5.14821844812, 960.22130923370),
    (0.00000000401, 4.36420932544, 739.05790726950),
    (0.00000000467, 2.96423984091, 170.01006625970),
    (0.00000000457, 4.45829983338, 33.13710079170),
    (0.00000000476, 3.63257697985, 20.49505323490),
    (0.00000000462, 3.57494442856, 71.60020482960),
    (0.00000000376, 2.94770389653, 6062.66320755260),
    (0.00000000473, 5.32759318114, 373.90799283650),
    (0.00000000383, 1.84111991862, 346.39996633730),
    (0.00000000366, 2.05039240297, 87.31177153950),
    (0.00000000383, 2.00608370504, 3274.12501778540),
    (0.00000000374, 5.65444305031, 540.73666535850),
    (0.00000000410, 5.62629715297, 58.31927233200),
    (0.00000000441, 6.26992749567, 378.90392768260),
    (0.00000000451, 3.05920369737, 898.77303279070),
    (0.00000000371, 5.65787287655, 89.75945209430),
    (0.00000000367, 5.71998148487, 96.87299909510),
    (0.00000000410, 1.06290837961, 1257.70317210020),
    (0.00000000418, 2.03053179312, 146.59425171800),
    (0.00000000492, 0.89529424356, 423.62924545940),
    (0.00000000474, 2.43080822444, 705.11765732570),
    (0.00000000457, 3.42347802916, 829.62050851590),
    (0.00000000419, 0.32183412086, 90.56260124640),
    (0.00000000347, 3.60116807440, 449.23210812500),
    (0.00000000397, 2.29159647723, 782.34693644780),
    (0.00000000433, 3.40938468811, 32.45577723550),
    (0.00000000343, 4.30952656038, 401.32539661050),
    (0.00000000351, 0.42160026295, 3686.49611465980),
    (0.00000000360, 5.83204569879, 491.55792945680),
    (0.00000000389, 2.73429108352, 36.17548217750),
    (0.00000000434, 0.33664392528, 55.13787859430),
    (0.00000000346, 5.09191837323, 392.65794093220),
    (0.00000000336, 2.38696934868, 295.19424100610),
    (0.00000000336, 1.56832822829, 233.74596456310),
    (0.00000000400, 3.08774286568, 745.91082183940),
    (0.00000000468, 4.21298903633, 832.58945393250),
    (0.00000000400, 1.32415028336, 551.10104206620),
    (0.00000000344, 1.52193307438, 754.83890994860),
    (0.00000000433, 3.06696455642, 885.43971066640),
    (0.00000000346, 4.76971433870, 4113.09430553580),
    (0.00000000329, 3.31034285904, 952.35700270750),
    (0.00000000425, 2.90590905341, 462.02291352810),
    (0.00000000342, 5.87738962422, 561.93429400900),
    (0.00000000439, 0.20791179302, 768.85355562910),
    (0.00000000330, 2.08599193524, 614.62449204850),
    (0.00000000394, 3.59805431851, 1261.63532536330),
    (0.00000000369, 6.03075127328, 199.80571461930),
    (0.00000000375, 2.56075851331, 732.69511979410),
    (0.00000000408, 0.69233617038, 328.24071907260),
    (0.00000000331, 4.28333309370, 541.53981451060),
    (0.00000000323, 0.06694179304, 433.75992198660),
    (0.00000000431, 4.50603340920, 2914.01423582380),
    (0.00000000343, 2.18898146246, 80.19822453870),
    (0.00000000437, 5.34124436008, 387.24131496080),
    (0.00000000371, 4.82569229712, 103.35340664950),
    (0.00000000318, 3.75720880396, 749.20983565610),
    (0.00000000344, 0.70749566894, 229.97386999440),
    (0.00000000312, 6.02741985422, 361.37781986430),
    (0.00000000340, 0.64358874512, 303.86169668440),
    (0.00000000394, 0.49801994278, 248.46318565920),
    (0.00000000309, 5.83535487659, 236.19364511790),
    (0.00000000325, 2.65292455786, 757.21715453420),
    (0.00000000365, 0.56788400592, 402.21916848780),
    (0.00000000342, 3.83450185886, 519.39602435610),
    (0.00000000306, 0.35126074897, 354.99798604640),
    (0.00000000314, 5.42086935152, 1151.42900414390),
    (0.00000000384, 0.09367760642, 201.51968199120),
    (0.00000000307, 5.62165090342, 426.48631629140),
    (0.00000000301, 1.78550205039, 1354.43315884340),
    (0.00000000300, 5.23426324539, 190.40454575810),
    (0.00000000296, 3.15801280224, 192.85222631290),
    (0.00000000381, 1.98600461808, 109.94568878850),
    (0.00000000370, 5.57659190517, 562.14674233010),
    (0.00000000305, 2.73187068494, 840.66620877980),
    (0.00000000374, 3.73375594662, 420.44785172170),
    (0.00000000307, 4.03149340189, 426.71006546060),
    (0.00000000320, 1.42665180100, 2730.20695868920),
    (0.00000000392, 0.14343294900, 206.39799675830),
    (0.00000000288, 2.44787565138, 623.22251175760),
    (0.00000000344, 1.57825843162, 6290.18939699220),
    (0.00000000317, 1.84490263693, 214.94362684070),
    (0.00000000346, 2.16849893508, 3171.03224356680),
    (0.00000000286, 1.01623455966, 315.64111013120),
    (0.00000000361, 3.44807605339, 259.76951835400),
    (0.00000000280, 4.64272946177, 254.14044406150),
    (0.00000000285, 2.09430258387, 335.14181775230),
    (0.00000000281, 4.72136141979, 317.14262918200),
    (0.00000000289, 4.70265740009, 29.74746424980),
    (0.00000000290, 2.74360609522, 551.03160609700),
    (0.00000000300, 5.23308974173, 1321.43907040360),
    (0.00000000283, 1.21193797828, 1699.27921650320),
    (0.00000000280, 0.45877292284, 38.60611638980),
    (0.00000000273, 1.81952809851, 1056.20053645150),
    (0.00000000336, 5.63115066542, 95.22846769240),
    (0.00000000309, 3.33676739908, 1193.96727379680),
    (0.00000000288, 2.57603349418, 1166.40685767090),
    (0.00000000277, 3.35359995343, 532.87235883230),
    (0.00000000287, 0.37229115993, 114.94162363460),
    (0.00000000274, 4.21164027953, 90.82323367730),
    (0.00000000267, 5.61367132586, 870.46185713940),
    (0.00000000376, 6.14391456675, 913.00012679230),
    (0.00000000296, 5.75705165982, 4010.00153131720),
    (0.00000000304, 1.97982468634, 495.96316347190),
    (0.00000000308, 5.08911712262, 481.73606947030),
    (0.00000000265, 0.02893016561, 172.45774681450),
    (0.00000000291, 2.10106037916, 619.29035849450),
    (0.00000000273, 4.78343050572, 771.30123618390),
    (0.00000000358, 0.04093867464, 637.44960575920),
    (0.00000000272, 5.86505586319, 332.17287233570),
    (0.00000000266, 3.28626000731, 560.71045373160),
    (0.00000000312, 3.91213951915, 1226.21060271120),
    (0.00000000258, 3.41185135958, 426.81063919710),
    (0.00000000257, 1.06772454181, 714.67888488130),
    (0.00000000258, 6.24129294573, 426.38574255490),
    (0.00000000256, 0.75289096697, 103.84353374400),
    (0.00000000254, 3.21116652124, 102.34201469320),
    (0.00000000254, 6.14632777985, 620.25356634100),
    (0.00000000266, 2.54280196709, 132.88842257820),
    (0.00000000314, 0.31303204249, 991.71387862270),
    (0.00000000317, 2.93589163442, 357.23321828010),
    (0.00000000266, 6.12280636670, 57.51612317990),
    (0.00000000254, 2.99730079627, 642.34496686880),
    (0.00000000267, 5.54663413439, 628.59095361920),
    (0.00000000348, 1.33319249154, 815.06334611420),
    (0.00000000278, 5.59573741920, 334.55111692130),
    (0.00000000303, 3.22789148979, 409.18970313670),
    (0.00000000246, 3.90430259983, 441.57604440300),
    (0.00000000260, 3.86355293530, 639.37602145220),
    (0.00000000250, 0.07635434166, 2840.41327990860),
    (0.00000000246, 5.71009371698, 476.31944349890),
    (0.00000000301, 6.15272106984, 559.69906177530),
    (0.00000000268, 3.73809606804, 658.05653357870),
    (0.00000000316, 4.63035287047, 745.27768239300),
    (0.00000000311, 3.51827727424, 2751.54759969160),
    (0.00000000239, 0.51133317457, 1041.22268292450),
    (0.00000000238, 5.46347279420, 4216.18707975440),
    (0.00000000262, 3.20254407166, 1251.34038462480),
    (0.00000000238, 1.02679111743, 1262.38608488870),
    (0.00000000277, 3.32996713394, 545.47196777370),
    (0.00000000271, 0.49229846069, 419.53282798500),
    (0.00000000303, 3.77087511317, 285.37238101960),
    (0.00000000234, 3.64328189368, 407.47573576480),
    (0.00000000270, 3.93080966194, 313.47110834980),
    (0.00000000302, 3.15201610429, 915.23535902600),
    (0.00000000264, 0.46127639727, 720.89866000480),
    (0.00000000235, 1.74238582338, 369.08206769610),
    (0.00000000284, 5.20345848078, 395.10562148700),
    (0.00000000295, 5.03016292492, 594.65070367540),
    (0.00000000290, 1.94941528794, 907.37105249980),
    (0.00000000229, 0.11049722694, 3259.89792378380),
    (0.00000000304, 1.81516929363, 49.72125262290),
    (0.00000000268, 5.54944666204, 12352.85260454480),
    (0.00000000248, 4.39993603541, 385.54439393140),
    (0.00000000234, 1.63365119249, 3590.51688744200),
    (0.00000000317, 4.74907646809, 420.00590873700),
    (0.00000000228, 4.89094697746, 1181.43710082460),
    (0.00000000258, 2.41510535278, 550.13783421970),
    (0.00000000236, 4.10002766188, 6467.92575796160),
    (0.00000000249, 1.97767956861, 589.49471013490),
    (0.00000000226, 1.60308230318, 316.27999507200),
    (0.00000000286, 6.10513234736, 484.70501488690),
    (0.00000000299, 3.71741328977, 1123.11782849260),
    (0.00000000263, 1.85502475341, 608.87779767700),
    (0.00000000220, 0.94624116595, 316.50374424120),
    (0.00000000292, 3.12099513976, 47.69426319340),
    (0.00000000217, 4.93010394323, 281.17959532560),
    (0.00000000295, 3.18346450625, 1050.99635880120),
    (0.00000000248, 5.48523310249, 638.93407846750),
    (0.00000000276, 1.09325899753, 544.50875992720),
    (0.00000000279, 2.65446123759, 134.11226285560),
    (0.00000000247, 4.17284927352, 950.13881681630),
    (0.00000000212, 2.45582771491, 1164.76232626820),
    (0.00000000266, 2.30028827109, 314.90739694830),
    (0.00000000215, 3.55148746518, 1097.09427470170),
    (0.00000000223, 0.36862624591, 81.89514556810),
    (0.00000000283, 0.35013012349, 1269.49963188950),
    (0.00000000263, 0.58255768951, 386.98068252990),
    (0.00000000208, 4.61303945066, 668.20846196530),
    (0.00000000222, 4.51639912193, 304.12232911530),
    (0.00000000274, 0.63572336701, 679.25416222920),
    (0.00000000215, 0.74685271552, 1008.97935401010),
    (0.00000000268, 3.43326489941, 598.84348936940),
    (0.00000000271, 3.98364990268, 453.68552624990),
    (0.00000000215, 2.24139383226, 661.23792731640),
    (0.00000000264, 2.58516335032, 2527.20280398970),
    (0.00000000205, 1.94472028389, 650.19222705250),
    (0.00000000258, 1.50724315598, 1759.83372106890),
    (0.00000000272, 6.27135287672, 990.22940591440),
    (0.00000000201, 1.11891338895, 97.41551581630),
    (0.00000000236, 4.13547185065, 348.63519857100),
    (0.00000000201, 2.67485193508, 1546.53462563090),
    (0.00000000250, 5.44391862722, 1254.52177836250),
    (0.00000000203, 5.48660442144, 557.03893289940),
    (0.00000000250, 0.32142312427, 25448.00585526019),
    (0.00000000198, 0.91019549387, 1310.39337013970),
    (0.00000000200, 0.90438804926, 47.06112374700),
    (0.00000000194, 4.05730813129, 426.85882330690),
    (0.00000000197, 0.58292199999, 156.67674413540),
    (0.00000000197, 2.59384188520, 639.84910220420),
    (0.00000000201, 1.49980256114, 827.92358748650),
    (0.00000000197, 5.79126360809, 639.94547042380),
    (0.00000000266, 1.45514683392, 109.24311337290),
    (0.00000000239, 4.63640382863, 868.71675200020),
    (0.00000000194, 5.59582424111, 426.33755844510),
    (0.00000000247, 2.91348766248, 689.61853893690),
    (0.00000000205, 1.04616771894, 448.68959140380),
    (0.00000000232, 1.76503818816, 354.26427286350),
    (0.00000000224, 3.45391027762, 1190.03512053370),
    (0.00000000221, 6.27951545913, 1596.18644228460),
    (0.00000000237, 1.24961141369, 882.94384600180),
    (0.00000000206, 5.17010664247, 253.45912050530),
    (0.00000000203, 0.25518217825, 4002.88798431640),
    (0.00000000245, 3.94368773869, 769.81676347560),
    (0.00000000255, 6.11790751550, 763.43692965770),
    (0.00000000194, 2.83197251801, 263.70167161710),
    (0.00000000237, 2.14007373880, 2700.71514038580),
    (0.00000000203, 3.00078001542, 1385.17496870700),
    (0.00000000203, 3.88000057282, 419.43645976540),
    (0.00000000186, 4.79530535895, 843.63515419640),
    (0.00000000203, 0.16707173895, 535.91074021810),
    (0.00000000245, 0.76762638475, 5643.17856367740),
    (0.00000000183, 2.20151176434, 35.16409022120),
    (0.00000000242, 3.41613986919, 864.24208201590),
    (0.00000000249, 3.47840802421, 1045.88854937050),
    (0.00000000199, 4.70077509959, 1276.61317889030),
    (0.00000000189, 1.84247610390, 434.67494572330),
    (0.00000000192, 3.83148077309, 666.72398925700),
    (0.00000000201, 1.34290804373, 1012.91150727320),
    (0.00000000210, 5.12097279511, 3494.53766022420),
    (0.00000000192, 1.36630036429, 904.40210708320),
    (0.00000000195, 1.62629576534, 364.34676528090),
    (0.00000000179, 1.66502999050, 244.79166482700),
    (0.00000000186, 4.55663748319, 347.41135829360),
    (0.00000000201, 0.50219680740, 36.38793049860),
    (0.00000000179, 4.55153097409, 97.46369992610),
    (0.00000000200, 0.68398141887, 2015.67108615980),
    (0.00000000195, 2.20599546209, 66.18357885820),
    (0.00000000186, 4.48925201018, 611.44309831080),
    (0.00000000186, 3.13663606153, 433.66355376700),
    (0.00000000177, 3.62811326217, 326.68681039510),
    (0.00000000206, 0.38552475035, 857.12853501510),
    (0.00000000229, 1.22330638216, 2906.90068882300),
    (0.00000000213, 6.08436923028, 271.61836777000),
    (0.00000000174, 6.18833529233, 3576.28979344040),
    (0.00000000220, 2.89866380776, 322.61164478010),
    (0.00000000202, 2.43755817264, 812.14258480740),
    (0.00000000211, 4.27999470527, 1127.26243007680),
    (0.00000000188, 0.97173474238, 1080.72257119160),
    (0.00000000168, 0.65008064023, 1493.09366806600),
    (0.00000000208, 4.68942071563, 5429.87946823940),
    (0.00000000182, 0.76058628096, 504.56118318100),
    (0.00000000167, 6.22608046965, 108.50940019000),
    (0.00000000176, 2.08816807487, 670.91677495100),
    (0.00000000170, 1.55680702386, 1670.82502850000),
    (0.00000000187, 4.12687876136, 9985.75935677140),
    (0.00000000166, 1.58596354370, 1379.70595310890),
    (0.00000000170, 1.30946662341, 837.69726336320),
    (0.00000000166, 0.02413278965, 224.60542813280),
    (0.00000000204, 6.12072939658, 9360.08916445900),
    (0.00000000189, 0.28191962964, 1175.80802653210),
    (0.00000000184, 2.87461093640, 398.14400287280),
    (0.00000000172, 5.41410693088, 2306.79016155090),
    (0.00000000174, 0.94052578814, 632.03297978780),
    (0.00000000181, 2.20017945285, 1049.08698945070),
    (0.00000000176, 1.09857632660, 531.97858695500),
    (0.00000000201, 2.68411933635, 795.68025857210),
    (0.00000000197, 1.43444932583, 347.36317418380),
    (0.00000000200, 4.33954193534, 1364.72809958190),
    (0.00000000166, 2.83936872840, 3553.91152213780),
    (0.00000000160, 1.28778451384, 962.50893109410),
    (0.00000000206, 3.02518737424, 1141.13406340540),
    (0.00000000200, 5.54644533685, 308.31511480930),
    (0.00000000158, 4.75462437610, 1534.73816584160),
    (0.00000000156, 3.42359004405, 241.75328344120),
    (0.00000000182, 5.26192506263, 968.13800538660),
    (0.00000000168, 0.37055108740, 10007.09999777380),
    (0.00000000174, 4.61279044571, 223.33340374560),
    (0.00000000158, 4.23116519562, 821.70381236300),
    (0.00000000212, 5.98406058023, 432.74853003030),
    (0.00000000160, 4.08093018212, 632.73555520340),
    (0.00000000179, 5.74376301842, 924.04582705620),
    (0.00000000185, 3.01715709315, 55.87159177720),
    (0.00000000185, 0.75718598244, 1286.90811962880),
    (0.00000000170, 3.46903106526, 1304.92435454160),
    (0.00000000167, 3.19767851189, 635.23141986800),
    (0.00000000153, 3.83006208210, 318.67949151700),
    (0.00000000156, 1.61558494091, 110.25450532920),
    (0.00000000206, 1.62702696825, 389.94962794650),
    (0.00000000184, 3.31730160238, 1578.02719501990),
    (0.00000000184, 6.19913208096, 731.68372783780),
    (0.00000000158, 5.58628906712, 42.32582133180),
    (0.00000000159, 2.00727485442, 702.14871190910),
    (0.00000000155, 0.02889842368, 1357.61455258110),
    (0.00000000151, 5.80616069064, 680.05731138130),
    (0.00000000157, 5.67235483479, 77837.11123384659),
    (0.00000000156, 2.78001360754, 1567.73225428140),
    (0.00000000203, 5.91820261629, 971.10695080320),
    (0.00000000156, 5.68482948401, 649.45851386960),
    (0.00000000186, 5.72093247348, 664.27630870220),
    (0.00000000184, 4.05878767739, 976.73602509570),
    (0.00000000159, 3.10978439502, 230.70758317730),
    (0.00000000154, 4.54479813612, 1239.54392483550),
    (0.00000000177, 4.68148789757, 2921.12778282460),
    (0.00000000158, 4.30854435851, 633.74694715970),
    (0.00000000195, 5.33376523453, 1130.23137549340),
    (0.00000000188, 2.04023570497, 1127.04998175570),
    (0.00000000174, 2.88817750136, 25668.41849769900),
    (0.00000000161, 2.96300008890, 152.74459087230),
    (0.00000000170, 1.70779560770, 493.30303459600),
    (0.00000000156, 3.05331862578, 913.75088631770),
    (0.00000000169, 3.18325334507, 757.80785536520),
    (0.00000000145, 0.89672198690, 632.83192342300),
    (0.00000000149, 2.69519361988, 203.26478713040),
    (0.00000000167, 2.96547549589, 1201.83158032300),
    (0.00000000187, 3.17592113403, 842.90144101350),
    (0.00000000173, 1.91528836350, 3487.42411322340),
    (0.00000000154, 0.37169915171, 285.11174858870),
    (0.00000000198, 3.14620903981, 640.86049416050),
    (0.00000000143, 3.42760427364, 520.12973753900),
    (0.00000000157, 2.34913118792, 5959.57043333400),
    (0.00000000178, 5.34566184657, 272.58157561650),
    (0.00000000171, 3.34185265551, 3067.93946934820),
    (0.00000000171, 4.87848878292, 354.52490529440),
    (0.00000000189, 0.07069084691, 1585.89150154610),
    (0.00000000137, 1.28925665885, 214.10224459010),
    (0.00000000137, 3.49438482900, 212.49594628590),
    (0.00000000174, 3.07450555579, 64.95973858080),
    (0.00000000181, 0.78652249647, 657.16276170140),
    (0.00000000158, 2.93809799392, 211.65456403530),
    (0.00000000133, 5.70724173596, 469.72716135990),
    (0.00000000140, 0.35530248121, 219.51887056150),
    (0.00000000132, 1.60614108449, 1372.59240610810),
    (0.00000000164, 1.68236348359, 707.56533788050),
    (0.00000000128, 1.49742950959, 45.24658263860),
    (0.00000000132, 4.98075995751, 238.57188970350),
    (0.00000000140, 3.62845435388, 423.88987789030),
    (0.00000000134, 1.41837795083, 3906.90875709860),
    (0.00000000127, 1.48966646069, 856.37777548970),
    (0.00000000158, 2.57990141197, 369.97583957340),
    (0.00000000132, 2.39662455993, 184.72728735580),
    (0.00000000140, 4.36785639279, 207.07932031450),
    (0.00000000157, 4.56655940808, 251.17149864490),
    (0.00000000125, 4.60433583965, 6076.89030155420),
    (0.00000000121, 1.59513269211, 184.84490743480),
    (0.00000000145, 5.85121885906, 221.89711514710),
    (0.00000000137, 0.76499603885, 476.10699517780),
    (0.00000000139, 6.02467582226, 429.30650386170),
    (0.00000000117, 0.23611722307, 426.75824957040),
    (0.00000000117, 3.13382984215, 426.43813218160),
    (0.00000000116, 4.34801448720, 418.96337901340),
    (0.00000000135, 2.69789181467, 455.16999895820),
    (0.00000000134, 1.19058772772, 502.86426215160),
    (0.00000000123, 3.97560160218, 499.89531673500),
    (0.00000000110, 2.37032413718, 439.93151300030),
    (0.00000000109, 6.20303291896, 220.30076785420),
    (0.00000000109, 1.38979633175, 325.95309721220),
    (0.00000000115, 0.05845336809, 631.82053146670),
    (0.00000000139, 2.21086387259, 9573.38825989700),
    (0.00000000142, 6.14666228712, 3340.61242669980),
    (0.00000000122, 4.77182119272, 604.47256366190),
    (0.00000000119, 3.03461367061, 528.20649238630),
    (0.00000000127, 2.97263950543, 498.93210888850),
    (0.00000000111, 5.01192320232, 220.20019411770),
    (0.00000000126, 3.95743516129, 566.60016045500),
    (0.00000000098, 2.36210526249, 634.26821202150),
    (0.00000000108, 2.46872857126, 83.37961827640),
    (0.00000000101, 4.88259474274, 425.32616648880),
    (0.00000000127, 4.89006771254, 162.09337010680),
    (0.00000000099, 0.90073463816, 586.31331639720),
    (0.00000000099, 0.16310526294, 394.35486196160),
    (0.00000000115, 0.49160291262, 517.16079212240),
    (0.00000000101, 3.86043866859, 198.10879358990),
    (0.00000000105, 3.48222097813, 5863.59120611620),
    (0.00000000104, 4.61148354671, 220.52451702340),
    (0.00000000101, 4.77041950285, 427.87021526320),
    (0.00000000098, 2.90784721214, 199.96577331370),
    (0.00000000127, 0.14136936897, 2332.06295581640),
    (0.00000000091, 6.22628300117, 211.29335786790),
    (0.00000000100, 5.14847283436, 226.79247625670),
    (0.00000000091, 4.84054379386, 215.30483300810),
    (0.00000000099, 4.37583492400, 640.41855117580),
    (0.00000000093, 5.30395179617, 222.70026429920),
    (0.00000000086, 4.57481701854, 636.97652500720),
    (0.00000000111, 0.61102669309, 1089.12939443900),
    (0.00000000086, 4.50969293872, 625.88264063350),
    (0.00000000088, 0.36828594935, 444.12429869430),
    (0.00000000093, 5.76287499885, 203.89792657680),
    (0.00000000082, 2.85558603378, 318.83955021140),
    (0.00000000082, 5.19618475111, 1467.82087380050),
    (0.00000000086, 0.97633784601, 200.03520928290),
    (0.00000000082, 4.78557953017, 195.77298761970),
    (0.00000000106, 2.29520624233, 799.61241183520),
    (0.00000000081, 3.57727166766, 205.97310011610),
    (0.00000000078, 5.50343512580, 262.80789973980),
    (0.00000000087, 0.76830756075, 201.99276274320),
    (0.00000000102, 2.11516755277, 206.93630796260),
    (0.00000000081, 5.29639775054, 111.16952906590),
    (0.00000000075, 2.77117107886, 255.83736509090),
    (0.00000000074, 5.81587984729, 316.44005376640),
    (0.00000000076, 1.78743197928, 171.65459766240),
    (0.00000000094, 4.99996904753, 378.64329525170),
    (0.00000000089, 5.85818860151, 807.94979911340),
    (0.00000000072, 0.99858616883, 280.21638747910),
    (0.00000000099, 0.15018241445, 186.21176006410),
    (0.00000000072, 5.15715918322, 110.15813710960),
)

L1 = (
    (213.54295595986, 0.00000000000, 0.00000000000),
    (0.01296855005, 1.82820544701, 213.29909543800),
    (0.00564347566, 2.88500136429, 7.11354700080),
    (0.00098323030, 1.08070061328, 426.59819087600),
    (0.00107678770, 2.27769911872, 206.18554843720),
    (0.00040254586, 2.04128257090, 220.41264243880),
    (0.00019941734, 1.27954662736, 103.09277421860),
    (0.00010511706, 2.74880392800, 14.22709400160),
    (0.00006939233, 0.40493079985, 639.89728631400),
    (0.00004803325, 2.44194097666, 419.48464387520),
    (0.00004056325, 2.92166618776, 110.20632121940),
    (0.00003768630, 3.64965631460, 3.93215326310),
    (0.00003384684, 2.41694251653, 3.18139373770),
    (0.00003302200, 1.26256486715, 433.71173787680),
    (0.00003071382, 2.32739317750, 199.07200143640),
    (0.00001953036, 3.56394683300, 11.04570026390),
    (0.00001249348, 2.62803737519, 95.97922721780),
    (0.00000921683, 1.96089834250, 227.52618943960),
    (0.00000705587, 4.41689249330, 529.69096509460),
    (0.00000649654, 6.17418093659, 202.25339517410),
    (0.00000627603, 6.11088227167, 309.27832265580),
    (0.00000486843, 6.03998200305, 853.19638175200),
    (0.00000468377, 4.61707843907, 63.73589830340),
    (0.00000478501, 4.98776987984, 522.57741809380),
    (0.00000417010, 2.11708169277, 323.50541665740),
    (0.00000407630, 1.29949556676, 209.36694217490),
    (0.00000343826, 3.95854178574, 412.37109687440),
    (0.00000339724, 3.63396398752, 316.39186965660),
    (0.00000335936, 3.77173072712, 735.87651353180),
    (0.00000331933, 2.86077699882, 210.11770170030),
    (0.00000352489, 2.31707079463, 632.78373931320),
    (0.00000289429, 2.73263080235, 117.31986822020),
    (0.00000265801, 0.54344631312, 647.01083331480),
    (0.00000230493, 1.64428879621, 216.48048917570),
    (0.00000280911, 5.74398845416, 2.44768055480),
    (0.00000191667, 2.96512946582, 224.34479570190),
    (0.00000172891, 4.07695221044, 846.08283475120),
    (0.00000167131, 2.59745202658, 21.34064100240),
    (0.00000136328, 2.28580246629, 10.29494073850),
    (0.00000131364, 3.44108355646, 742.99006053260),
    (0.00000127838, 4.09533471247, 217.23124870110),
    (0.00000108862, 6.16141072262, 415.55249061210),
    (0.00000093909, 3.48397279899, 1052.26838318840),
    (0.00000092482, 3.94755499926, 88.86568021700),
    (0.00000097584, 4.72845436677, 838.96928775040),
    (0.00000086600, 1.21951325061, 440.82528487760),
    (0.00000083463, 3.11269504725, 625.67019231240),
    (0.00000077588, 6.24408938835, 302.16477565500),
    (0.00000061557, 1.82789612597, 195.13984817330),
    (0.00000061900, 4.29344363385, 127.47179660680),
    (0.00000067106, 0.28961738595, 4.66586644600),
    (0.00000056919, 5.01889578112, 137.03302416240),
    (0.00000054160, 5.12628572382, 490.33408917940),
    (0.00000054585, 0.28356341456, 74.78159856730),
    (0.00000051425, 1.45766406064, 536.80451209540),
    (0.00000065843, 5.64757042732, 9.56122755560),
    (0.00000057780, 2.47630552035, 191.95845443560),
    (0.00000044444, 2.70873627665, 5.41662597140),
    (0.00000046799, 1.17721211050, 149.56319713460),
    (0.00000040380, 3.88870105683, 728.76296653100),
    (0.00000037768, 2.53379013859, 12.53017297220),
    (0.00000046649, 5.14818326902, 515.46387109300),
    (0.00000045891, 2.23198878761, 956.28915597060),
    (0.00000040400, 0.41281520440, 269.92144674060),
    (0.00000037191, 3.78239026411, 2.92076130680),
    (0.00000033778, 3.21070688046, 1368.66025284500),
    (0.00000037969, 0.64665967180, 422.66603761290),
    (0.00000032857, 0.30063884563, 351.81659230870),
    (0.00000033050, 5.43038091186, 1066.49547719000),
    (0.00000030276, 2.84067004928, 203.00415469950),
    (0.00000035116, 6.08421794089, 5.62907429250),
    (0.00000029667, 3.39052569135, 1059.38193018920),
    (0.00000033217, 4.64063092111, 277.03499374140),
    (0.00000031876, 4.38622923770, 1155.36115740700),
    (0.00000028913, 2.02614760507, 330.61896365820),
    (0.00000028264, 2.74178953996, 265.98929347750),
    (0.00000030089, 6.18684614308, 284.14854074220),
    (0.00000031329, 2.43455855525, 52.69019803950),
    (0.00000026493, 4.51214170121, 340.77089204480),
    (0.00000021983, 5.14437352579, 4.19278569400),
    (0.00000022230, 1.96481952451, 203.73786788240),
    (0.00000020824, 6.16048095923, 860.30992875280),
    (0.00000021690, 2.67578768862, 942.06206196900),
    (0.00000022552, 5.88579123000, 210.85141488320),
    (0.00000019807, 2.31345263487, 437.64389113990),
    (0.00000019447, 4.76573277668, 70.84944530420),
    (0.00000019310, 4.10209060369, 18.15924726470),
    (0.00000022662, 4.13732273379, 191.20769491020),
    (0.00000018209, 0.90310796389, 429.77958461370),
    (0.00000017667, 1.84954766042, 234.63973644040),
    (0.00000017547, 2.44735118493, 423.41679713830),
    (0.00000015428, 4.23790088205, 1162.47470440780),
    (0.00000014608, 3.59713247857, 1045.15483618760),
    (0.00000014111, 2.94262468353, 1685.05212250160),
    (0.00000016328, 4.05665272725, 949.17560896980),
    (0.00000013348, 6.24509592240, 38.13303563780),
    (0.00000015918, 1.06434204938, 56.62235130260),
    (0.00000014059, 1.43503954068, 408.43894361130),
    (0.00000013093, 5.75815864257, 138.51749687070),
    (0.00000015772, 5.59350835225, 6.15033915430),
    (0.00000014962, 5.77192239389, 22.09140052780),
    (0.00000016024, 1.93900586533, 1272.68102562720),
    (0.00000016751, 5.96673627422, 628.85158605010),
    (0.00000012843, 4.24658666814, 405.25754987360),
    (0.00000013628, 4.09892958087, 1471.75302706360),
    (0.00000015067, 0.74142807591, 200.76892246580),
    (0.00000010961, 1.55022573283, 223.59403617650),
    (0.00000011695, 1.81237511034, 124.43341522100),
    (0.00000010346, 3.46814088412, 1375.77379984580),
    (0.00000012056, 1.85655834555, 131.40394986990),
    (0.00000010123, 2.38221133049, 107.02492748170),
    (0.00000009855, 3.95166998848, 430.53034413910),
    (0.00000009803, 2.55389483994, 99.91138048090),
    (0.00000010614, 5.36692189034, 215.74677599280),
    (0.00000012080, 4.84549317054, 831.85574074960),
    (0.00000010210, 6.07692961370, 32.24332891440),
    (0.00000009245, 3.65417467270, 142.44965013380),
    (0.00000008984, 1.23808405498, 106.27416795630),
    (0.00000009336, 5.81062768434, 7.16173111060),
    (0.00000009717, 1.38703872827, 145.63104387150),
    (0.00000008394, 4.42341211111, 703.63318461740),
    (0.00000008370, 5.64015188458, 62.25142559510),
    (0.00000008244, 2.42225929772, 1258.45393162560),
    (0.00000007784, 0.52562994711, 654.12438031560),
    (0.00000007626, 3.75258725596, 312.19908396260),
    (0.00000007222, 0.28429555677, 0.75075952540),
    (0.00000008236, 6.22250515902, 14.97785352700),
    (0.00000007054, 0.53177810740, 388.46515523820),
    (0.00000006567, 3.48657341701, 35.42472265210),
    (0.00000009011, 4.94919626910, 208.63322899200),
    (0.00000008980, 0.08138173719, 288.08069400530),
    (0.00000006421, 3.32905264657, 1361.54670584420),
    (0.00000006489, 2.89389587598, 114.13847448250),
    (0.00000006244, 0.54973852782, 65.22037101170),
    (0.00000006154, 2.67885860584, 2001.44399215820),
    (0.00000006742, 0.23586769279, 8.07675484730),
    (0.00000007297, 4.85321224483, 222.86032299360),
    (0.00000006302, 3.80651124694, 1788.14489672020),
    (0.00000005824, 4.39327457448, 81.75213321620),
    (0.00000006102, 0.88585782895, 92.04707395470),
    (0.00000006914, 2.04631426723, 99.16062095550),
    (0.00000005363, 5.47995103139, 563.63121503840),
    (0.00000005172, 2.11968421583, 214.26230328450),
    (0.00000005117, 5.76987684107, 565.11568774670),
    (0.00000006197, 1.62553688800, 1589.07289528380),
    (0.00000004970, 0.41949366126, 76.26607127560),
    (0.00000006640, 5.82582210639, 483.22054217860),
    (0.00000005277, 4.57975789757, 134.58534360760),
    (0.00000004974, 4.20243895902, 404.50679034820),
    (0.00000005150, 4.67582673243, 212.33588759150),
    (0.00000004764, 4.59303997414, 554.06998748280),
    (0.00000004573, 3.24875415786, 231.45834270270),
    (0.00000004811, 0.46206327592, 362.86229257260),
    (0.00000005148, 3.33570646174, 1.48447270830),
    (0.00000004654, 5.80233066659, 217.96496188400),
    (0.00000004509, 5.37581684215, 497.44763618020),
    (0.00000004443, 0.11349392292, 295.05122865420),
    (0.00000004943, 3.78020789259, 1265.56747862640),
    (0.00000004211, 4.88306021960, 98.89998852460),
    (0.00000004252, 5.00120115113, 213.34727954780),
    (0.00000004774, 4.53259894142, 1148.24761040620),
    (0.00000003911, 0.58582192963, 750.10360753340),
    (0.00000005069, 2.20305668335, 207.88246946660),
    (0.00000003553, 0.35374030841, 333.65734504400),
    (0.00000003771, 0.98542435766, 24.37902238820),
    (0.00000003458, 1.84990273999, 225.82926841020),
    (0.00000003401, 5.31342401626, 347.88443904560),
    (0.00000003347, 0.21414641376, 635.96513305090),
    (0.00000003637, 1.61315058382, 245.54242435240),
    (0.00000003416, 2.19551489078, 1574.84580128220),
    (0.00000003655, 0.80544245690, 343.21857259960),
    (0.00000004260, 1.80258750109, 213.25091132820),
    (0.00000003110, 3.03815175282, 1677.93857550080),
    (0.00000003052, 1.33858964447, 543.91805909620),
    (0.00000003694, 0.81606028298, 344.70304530790),
    (0.00000003016, 3.36219319026, 7.86430652620),
    (0.00000002937, 4.86927342776, 144.14657116320),
    (0.00000002768, 2.42707131609, 2317.83586181480),
    (0.00000003059, 4.30820099442, 6062.66320755260),
    (0.00000003650, 5.12802531219, 218.92816973050),
    (0.00000002963, 3.53480751374, 2104.53676637680),
    (0.00000003230, 2.88057019783, 216.21985674480),
    (0.00000002984, 2.52971310583, 1692.16566950240),
    (0.00000002897, 5.73256482240, 9992.87290377220),
    (0.00000002591, 3.79880285744, 17.26547538740),
    (0.00000003495, 5.29902525443, 350.33211960040),
    (0.00000002859, 3.72804950659, 6076.89030155420),
    (0.00000002775, 0.23549396237, 357.44566660120),
    (0.00000002976, 2.48769315964, 46.47042291600),
    (0.00000002487, 4.37868078530, 217.49188113200),
    (0.00000002711, 5.15376840150, 10007.09999777380),
    (0.00000003127, 1.92343235583, 17.40848773930),
    (0.00000003181, 1.72419900322, 1169.58825140860),
    (0.00000002348, 0.77373103004, 414.06801790380),
    (0.00000002606, 3.42836913440, 31.01948863700),
    (0.00000002556, 0.91735028377, 479.28838891550),
    (0.00000002399, 4.82440545738, 1279.79457262800),
    (0.00000002245, 3.76323995584, 425.11371816770),
    (0.00000003020, 0.25310250109, 120.35824960600),
    (0.00000002503, 2.10679832121, 168.05251279940),
    (0.00000002564, 1.63158205055, 182.27960680100),
    (0.00000002221, 3.15472373256, 212.77783057620),
    (0.00000002357, 2.33145013714, 218.71572140940),
    (0.00000002510, 4.51903989011, 198.32124191100),
    (0.00000002715, 5.76330259543, 618.55664531160),
    (0.00000002204, 3.35952557362, 160.60889739850),
    (0.00000002648, 0.71962005233, 85.82729883120),
    (0.00000002029, 5.28642331696, 125.98732389850),
    (0.00000002497, 1.36671447252, 1905.46476494040),
    (0.00000002017, 1.11498225426, 447.93883187840),
    (0.00000002052, 1.27587874735, 14.01464568050),
    (0.00000002254, 3.22447674190, 273.10284047830),
    (0.00000002014, 0.39787014152, 358.93013930950),
    (0.00000001981, 2.33696859021, 28.45418800320),
    (0.00000002197, 5.93386789705, 13.33332212430),
    (0.00000002237, 3.64433751164, 213.82036029980),
    (0.00000001930, 1.85671740340, 1.27202438720),
    (0.00000002037, 5.05300562628, 424.15051032120),
    (0.00000001994, 1.35690802366, 20.60692781950),
    (0.00000001911, 3.44106886717, 69.15252427480),
    (0.00000001925, 3.75243031545, 28.31117565130),
    (0.00000002297, 4.24557050896, 1464.63948006280),
    (0.00000002117, 2.25897766314, 116.42609634290),
    (0.00000001847, 5.40631472802, 31.49256938900),
    (0.00000001841, 1.56916484272, 650.94298657790),
    (0.00000001884, 6.27233535258, 25.12978191360),
    (0.00000001960, 4.89484014840, 275.55052103310),
    (0.00000002016, 5.45791785675, 842.15068148810),
    (0.00000002282, 4.96276947440, 258.87574647670),
    (0.00000001709, 3.99098237135, 416.30325013750),
    (0.00000002176, 0.00746756006, 0.89377187730),
    (0.00000001634, 5.30978165487, 251.43213107580),
    (0.00000001687, 0.41586020065, 54.17467074780),
    (0.00000001910, 2.59825755790, 329.72519178090),
    (0.00000002113, 2.56582292726, 59.80374504030),
    (0.00000001921, 2.42279051938, 113.38771495710),
    (0.00000001658, 5.47323651540, 1073.60902419080),
    (0.00000001590, 2.77545297350, 1994.33044515740),
    (0.00000001936, 3.47558926847, 1581.95934828300),
    (0.00000001649, 1.82779010589, 128.95626931510),
    (0.00000001598, 1.71806465300, 129.91947716160),
    (0.00000001967, 1.25160413795, 621.73803904930),
    (0.00000001702, 1.91076102800, 278.51946644970),
    (0.00000001569, 0.16491194947, 643.07868005170),
    (0.00000001989, 5.28799230992, 508.35032409220),
    (0.00000001520, 0.56950979689, 320.32402291970),
    (0.00000001501, 1.99815894193, 1891.23767093880),
    (0.00000001532, 3.27362317849, 2420.92863603340),
    (0.00000001701, 2.72041261115, 767.36908292080),
    (0.00000001561, 6.09424459628, 280.96714700450),
    (0.00000001331, 4.20944443790, 546.95644048200),
    (0.00000001381, 2.06768100830, 192.69216761850),
    (0.00000001368, 6.28049502257, 1795.25844372100),
    (0.00000001519, 2.20299556153, 2008.55753915900),
    (0.00000001356, 4.01521042413, 721.64941953020),
    (0.00000001296, 4.84815978742, 45.57665103870),
    (0.00000001267, 5.28146654999, 173.94221952280),
    (0.00000001402, 6.12951551550, 39.35687591520),
    (0.00000001252, 2.19169926554, 2634.22773147140),
    (0.00000001466, 4.16354845643, 26.82670294300),
    (0.00000001285, 3.76170874847, 2.28762186040),
    (0.00000001500, 5.41022492529, 214.04985496340),
    (0.00000001396, 4.78595583428, 219.44943459230),
    (0.00000001430, 0.70934745161, 254.94359321360),
    (0.00000001195, 3.71281085322, 264.50482076920),
    (0.00000001181, 0.42635230882, 41.64449777560),
    (0.00000001190, 2.02079286787, 1485.98012106520),
    (0.00000001160, 5.23649231796, 181.05576652360),
    (0.00000001535, 3.62746990294, 561.18353448360),
    (0.00000001120, 1.09127922130, 6.59228213900),
    (0.00000001100, 0.27844612141, 184.09414790940),
    (0.00000001227, 1.39969681270, 209.10630974400),
    (0.00000001353, 6.12903657666, 207.67002114550),
    (0.00000001124, 6.05105541765, 291.26208774300),
    (0.00000001194, 4.79565407023, 1478.86657406440),
    (0.00000001082, 4.73602931755, 78.71375183040),
    (0.00000001202, 3.47301104146, 51.20572533120),
    (0.00000001298, 2.34761557822, 210.37833413120),
    (0.00000001166, 4.20037524355, 417.03696332040),
    (0.00000001228, 3.94985981275, 1781.03134971940),
    (0.00000001401, 2.41318931513, 636.71589257630),
    (0.00000001009, 6.17414889934, 2111.65031337760),
    (0.00000001084, 3.68958647346, 274.06604832480),
    (0.00000001068, 0.80258823981, 436.89313161450),
    (0.00000001007, 3.42792508860, 629.60234557550),
    (0.00000000998, 5.57130056835, 205.22234059070),
    (0.00000001058, 1.05742945779, 237.67811782620),
    (0.00000001020, 3.33667290300, 166.82867252200),
    (0.00000000965, 6.08359503243, 601.76425067620),
    (0.00000001005, 3.56310748091, 643.82943957710),
    (0.00000000987, 0.97129012811, 305.34616939270),
    (0.00000000927, 3.87717400791, 135.33610313300),
    (0.00000001129, 5.94840103961, 196.62432088160),
    (0.00000001118, 5.25415059584, 189.72322220190),
    (0.00000001200, 1.16671933467, 2221.85663459700),
    (0.00000000909, 2.14001565047, 617.80588578620),
    (0.00000000899, 2.31811625712, 312.45971639350),
    (0.00000001081, 0.91006048421, 313.21047591890),
    (0.00000000891, 3.74923531791, 916.93228005540),
    (0.00000000886, 4.76066858907, 776.93031047640),
    (0.00000000912, 0.99592540858, 491.81856188770),
    (0.00000000880, 3.67349449376, 25.27279426550),
    (0.00000001203, 1.39749267410, 337.73251065900),
    (0.00000000867, 0.11684071625, 267.47376618580),
    (0.00000000879, 6.12222682852, 867.42347575360),
    (0.00000001080, 0.15038819285, 175.16605980020),
    (0.00000000988, 3.12456192471, 214.78356814630),
    (0.00000000889, 4.70508769146, 148.07872442630),
    (0.00000000827, 6.08977582217, 488.84961647110),
    (0.00000000889, 5.05124166027, 220.46082654860),
    (0.00000000828, 6.27262544155, 1382.88734684660),
    (0.00000001040, 5.76735098196, 501.37978944330),
    (0.00000001103, 0.48706477230, 692.58748435350),
    (0.00000000810, 2.50362385080, 2310.72231481400),
    (0.00000000850, 4.55410385197, 77.96299230500),
    (0.00000001108, 5.31792012163, 235.39049596580),
    (0.00000000790, 0.89213206336, 342.25536475310),
    (0.00000000775, 2.85873930879, 211.81462272970),
    (0.00000000842, 2.99884993009, 2737.32050569000),
    (0.00000000784, 0.05748459240, 543.02428721890),
    (0.00000000754, 5.18317747668, 244.31858407500),
    (0.00000000969, 1.31760425414, 486.40193591630),
    (0.00000000943, 5.48641674428, 339.28641933650),
    (0.00000000759, 6.25347177163, 151.04766984290),
    (0.00000000710, 2.41619968810, 247.23934538180),
    (0.00000000794, 2.59522645936, 1.64453140270),
    (0.00000000857, 1.99318788624, 248.72381809010),
    (0.00000000717, 4.56798357445, 121.25202148330),
    (0.00000000671, 2.50955477476, 444.75743814070),
    (0.00000000683, 5.51033310275, 487.36514376280),
    (0.00000000684, 0.01892628603, 228.27694896500),
    (0.00000000665, 1.47172657769, 427.56139872250),
    (0.00000000761, 4.61079808671, 23.57587323610),
    (0.00000000807, 3.21513718120, 1898.35121793960),
    (0.00000000645, 1.92436523628, 2950.61960112800),
    (0.00000000624, 6.05830190539, 241.61027108930),
    (0.00000000699, 4.02804515616, 425.63498302950),
    (0.00000000624, 5.85966148394, 696.51963761660),
    (0.00000000620, 1.86426453489, 2207.62954059540),
    (0.00000000641, 5.69868017561, 319.57326339430),
    (0.00000000646, 3.78920578728, 1038.04128918680),
    (0.00000000672, 2.54160055954, 271.40591944890),
    (0.00000000768, 1.80484245332, 2324.94940881560),
    (0.00000000737, 1.50539891226, 268.43697403230),
    (0.00000000836, 1.26583811010, 212.54833591260),
    (0.00000000753, 5.27536166240, 204.70107572890),
    (0.00000000633, 2.19920009577, 1802.37199072180),
    (0.00000000720, 2.58587107868, 472.17484191470),
    (0.00000000683, 3.83223866420, 43.28902917830),
    (0.00000000740, 6.21601938401, 556.51766803760),
    (0.00000000795, 1.14460330178, 381.35160823740),
    (0.00000000678, 3.65930963429, 2097.42321937600),
    (0.00000000568, 5.92158661090, 2428.04218303420),
    (0.00000000570, 1.18024241664, 131.54696222180),
    (0.00000000566, 4.74157739398, 380.12776796000),
    (0.00000000586, 5.71168743146, 570.74476203920),
    (0.00000000550, 4.92413290959, 188.92007304980),
    (0.00000000712, 2.69456114358, 16.67477455640),
    (0.00000000545, 5.38725529600, 206.23373254700),
    (0.00000000572, 5.79167804981, 195.89060769870),
    (0.00000000602, 5.81756794592, 963.40270297140),
    (0.00000000588, 4.25026865253, 426.64637498580),
    (0.00000000563, 3.28295055824, 193.65537546500),
    (0.00000000583, 5.44099997963, 526.50957135690),
    (0.00000000679, 4.45748326743, 105.54045477340),
    (0.00000000516, 5.99843937287, 289.56516671360),
    (0.00000000520, 2.19322568805, 180.16199464630),
    (0.00000000543, 4.19333695628, 213.18722085340),
    (0.00000000586, 3.03470168346, 6275.96230299060),
    (0.00000000572, 3.96788877624, 140.00196957900),
    (0.00000000611, 4.15392239870, 436.15941843160),
    (0.00000000505, 2.95739392583, 135.54855145410),
    (0.00000000587, 4.55320395537, 5863.59120611620),
    (0.00000000492, 2.71595874382, 84.93352695390),
    (0.00000000576, 5.98300938454, 9793.80090233580),
    (0.00000000489, 5.68450383182, 533.62311835770),
    (0.00000000519, 3.09688510923, 327.43756992050),
    (0.00000000486, 5.24220804875, 5849.36411211460),
    (0.00000000475, 4.51295931678, 411.62033734900),
    (0.00000000540, 4.44843952768, 10206.17199921020),
    (0.00000000479, 0.87707794164, 207.14875628370),
    (0.00000000468, 0.46572028197, 306.09692891810),
    (0.00000000586, 0.86387928244, 2538.24850425360),
    (0.00000000475, 6.19152982788, 397.39324334740),
    (0.00000000541, 1.47958133221, 42.53826965290),
    (0.00000000496, 6.07879620658, 576.16138801060),
    (0.00000000447, 2.59259132013, 7.22542158540),
    (0.00000000445, 5.06827300470, 778.41478318470),
    (0.00000000560, 0.00461017471, 221.37585028530),
    (0.00000000456, 4.60143715337, 710.74673161820),
    (0.00000000449, 5.79223649465, 685.47393735270),
    (0.00000000501, 1.91370965325, 831.10498122420),
    (0.00000000595, 4.90329839607, 824.74219374880),
    (0.00000000447, 4.88662794571, 429.04587143080),
    (0.00000000445, 1.74764943142, 525.75881183150),
    (0.00000000457, 0.80892712530, 458.84151979040),
    (0.00000000543, 2.60317945475, 213.41097002260),
    (0.00000000493, 0.61947189193, 41.05379694460),
    (0.00000000455, 2.69847252264, 3053.71237534660),
    (0.00000000429, 3.89071982978, 92.79783348010),
    (0.00000000411, 1.34981168865, 27.08733537390),
    (0.00000000448, 1.84775051361, 980.66817835880),
    (0.00000000445, 4.21745990439, 905.88657979150),
    (0.00000000403, 2.33067250642, 2627.11418447060),
    (0.00000000404, 5.00179215709, 431.26405732200),
    (0.00000000384, 1.65634584042, 241.75328344120),
    (0.00000000410, 0.76907037678, 395.57870223900),
    (0.00000000456, 1.98353741244, 213.51154375910),
    (0.00000000459, 2.04878772547, 285.63301345050),
    (0.00000000396, 5.04141834913, 298.23262239190),
    (0.00000000377, 5.68073822097, 2744.43405269080),
    (0.00000000415, 4.41600504868, 179.35884549420),
    (0.00000000396, 4.29872851950, 206.70681329900),
    (0.00000000389, 5.69091953122, 849.26422848890),
    (0.00000000369, 1.36192003466, 835.03713448730),
    (0.00000000374, 0.41402282126, 9779.57380833420),
    (0.00000000379, 1.72255764532, 184.98791978670),
    (0.00000000365, 5.88205574821, 19.64371997300),
    (0.00000000456, 4.81297899859, 213.08664711690),
    (0.00000000359, 1.06819138836, 206.13736432740),
    (0.00000000367, 1.14184327929, 569.04784100980),
    (0.00000000352, 3.04388401587, 638.41281360570),
    (0.00000000463, 1.55834877017, 421.18156490460),
    (0.00000000459, 5.34648461645, 699.70103135430),
    (0.00000000383, 4.05921035379, 739.80866679490),
    (0.00000000354, 1.09760553168, 738.79727483860),
    (0.00000000382, 0.05348541587, 252.65597135320),
    (0.00000000344, 1.18536656224, 439.12836384820),
    (0.00000000382, 2.10483762147, 532.61172640140),
    (0.00000000361, 0.50215018154, 50.40257617910),
    (0.00000000351, 3.49546336297, 1354.43315884340),
    (0.00000000395, 4.26278871560, 432.22726516850),
    (0.00000000345, 2.38455893509, 426.07692601420),
    (0.00000000350, 1.51541607946, 259.76951835400),
    (0.00000000426, 5.29998227949, 934.94851496820),
    (0.00000000339, 5.59774645356, 519.39602435610),
    (0.00000000388, 3.40083809779, 2413.81508903260),
    (0.00000000324, 3.68352014131, 72.07328558160),
    (0.00000000323, 1.79597508586, 405.99126305650),
    (0.00000000366, 3.56764349139, 1119.18567522950),
    (0.00000000358, 4.11241839677, 37.87240320690),
    (0.00000000423, 1.45116702108, 2641.34127847220),
    (0.00000000314, 0.68465789313, 757.21715453420),
    (0.00000000320, 3.12697568936, 945.99421523210),
    (0.00000000338, 4.89782013581, 898.77303279070),
    (0.00000000319, 5.76881401291, 69.36497259590),
    (0.00000000310, 5.35598720822, 815.06334611420),
    (0.00000000369, 4.46143610142, 421.93232443000),
    (0.00000000311, 2.19275640712, 5856.47765911540),
    (0.00000000306, 2.99917010799, 1130.23137549340),
    (0.00000000330, 0.64102961163, 558.00214074590),
    (0.00000000305, 0.40963115602, 661.23792731640),
    (0.00000000320, 3.29267319940, 760.25553592000),
    (0.00000000298, 5.48693246086, 702.14871190910),
    (0.00000000352, 2.18179692198, 2118.76386037840),
    (0.00000000299, 5.94980651345, 572.22923474750),
    (0.00000000343, 2.62900083650, 213.55972786890),
    (0.00000000296, 4.12563821701, 73.29712585900),
    (0.00000000360, 2.94387423457, 2214.74308759620),
    (0.00000000293, 5.71837797264, 60.76695288680),
    (0.00000000326, 1.93806509331, 480.77286162380),
    (0.00000000335, 2.60120542851, 518.38463239980),
    (0.00000000322, 2.89685459163, 427.11945573780),
    (0.00000000367, 2.20489848330, 518.64526483070),
    (0.00000000361, 3.31464351282, 630.33605875840),
    (0.00000000288, 0.87760478150, 887.72733252680),
    (0.00000000290, 0.24071300709, 705.11765732570),
    (0.00000000332, 5.96464701829, 100.64509366380),
    (0.00000000284, 1.58760551116, 681.54178408960),
    (0.00000000281, 1.68339116394, 3267.01147078460),
    (0.00000000287, 3.54730637851, 756.32338265690),
    (0.00000000331, 2.74250642576, 22.89454967990),
    (0.00000000281, 4.79802388453, 409.92341631960),
    (0.00000000372, 1.08754087151, 426.55000676620),
    (0.00000000340, 0.59629116557, 627.36711334180),
    (0.00000000325, 4.07319450014, 511.53171782990),
    (0.00000000273, 0.71334827688, 305.08553696180),
    (0.00000000272, 1.76124839309, 945.24345570670),
    (0.00000000295, 4.00327005783, 432.74853003030),
    (0.00000000271, 5.28903262032, 1080.72257119160),
    (0.00000000276, 3.89192411657, 610.69233878540),
    (0.00000000294, 2.80121651058, 724.83081326790),
    (0.00000000319, 5.24824059915, 229.97386999440),
    (0.00000000264, 2.36406383589, 731.94436026870),
    (0.00000000288, 4.67818844930, 170.76082578510),
    (0.00000000326, 3.81328980623, 525.49817940060),
    (0.00000000283, 3.52027709716, 319.31263096340),
    (0.00000000264, 0.25871603855, 494.26624244250),
    (0.00000000261, 4.08135671345, 25.86349509650),
    (0.00000000296, 4.49129913731, 693.55069220000),
    (0.00000000292, 0.65370180027, 25867.49049913539),
    (0.00000000292, 0.12510953311, 25881.71759313700),
    (0.00000000254, 4.03912322565, 990.22940591440),
    (0.00000000288, 3.98604904657, 707.77778620160),
    (0.00000000285, 1.92328297431, 3134.42687826260),
    (0.00000000284, 2.45411523294, 3120.19978426100),
    (0.00000000256, 3.63282757780, 430.79097657000),
    (0.00000000283, 2.51091647682, 286.59622129700),
    (0.00000000325, 4.33261281211, 732.69511979410),
    (0.00000000264, 0.05450228136, 650.19222705250),
    (0.00000000273, 4.90735780421, 409.18970313670),
    (0.00000000304, 4.61759348542, 468.24268865160),
    (0.00000000285, 5.72467903890, 33.94024994380),
    (0.00000000242, 5.28336514054, 403.02231763990),
    (0.00000000270, 0.51583145648, 263.70167161710),
    (0.00000000263, 4.81670787366, 1055.44977692610),
    (0.00000000237, 2.92617048443, 913.96333463880),
    (0.00000000246, 2.19675150666, 2943.50605412720),
    (0.00000000278, 4.58404840578, 398.14400287280),
    (0.00000000234, 2.64374114605, 739.05790726950),
    (0.00000000229, 3.80445074468, 58.10682401090),
    (0.00000000300, 2.06111081979, 429.51895218280),
    (0.00000000223, 3.39888651505, 188.02630117250),
    (0.00000000301, 2.96411385108, 624.91943278700),
    (0.00000000221, 1.79137414078, 2524.02141025200),
    (0.00000000220, 0.95686592581, 1894.41906467650),
    (0.00000000225, 4.30669421945, 637.44960575920),
    (0.00000000214, 1.70442143644, 658.05653357870),
    (0.00000000227, 3.22613053351, 638.93407846750),
    (0.00000000220, 2.66798936385, 953.10776223290),
    (0.00000000253, 3.09377787768, 29.20494752860),
    (0.00000000244, 3.15828383212, 7.00167241620),
    (0.00000000295, 4.95843934543, 714.67888488130),
    (0.00000000209, 0.94525938634, 864.24208201590),
    (0.00000000216, 0.12221236180, 28.57180808220),
    (0.00000000214, 2.80190604605, 373.90799283650),
    (0.00000000212, 2.07343849515, 1357.61455258110),
    (0.00000000216, 1.25531205533, 477.80391620720),
    (0.00000000206, 5.35971491902, 3060.82592234740),
    (0.00000000204, 3.08579410460, 67.66805156650),
    (0.00000000210, 1.91489853604, 938.12990870590),
    (0.00000000209, 1.46554109301, 952.35700270750),
    (0.00000000202, 3.57670882297, 334.55111692130),
    (0.00000000228, 5.66209641464, 1699.27921650320),
    (0.00000000197, 4.61055255182, 464.73122651380),
    (0.00000000193, 4.24606721746, 141.69889060840),
    (0.00000000266, 0.69665031373, 2854.64037391020),
    (0.00000000227, 1.31845358943, 230.70758317730),
    (0.00000000192, 5.26739976413, 504.56118318100),
    (0.00000000187, 0.85537192230, 273.85360000370),
    (0.00000000199, 3.91291687807, 418.52143602870),
    (0.00000000192, 6.15674105214, 611.44309831080),
    (0.00000000210, 1.47873602747, 205.43478891180),
    (0.00000000194, 2.37167703302, 3370.10424500320),
    (0.00000000228, 2.15266015145, 55.13787859430),
    (0.00000000201, 2.71380671608, 586.31331639720),
    (0.00000000194, 3.29560033731, 1670.82502850000),
    (0.00000000201, 4.23447633663, 1493.09366806600),
    (0.00000000181, 3.61567262848, 9786.68735533500),
    (0.00000000181, 2.83211558346, 1262.38608488870),
    (0.00000000242, 4.69869158516, 1141.13406340540),
    (0.00000000184, 4.66807336402, 1251.34038462480),
    (0.00000000221, 2.25887876254, 355.74874557180),
    (0.00000000200, 1.17340443616, 4952.06359328620),
    (0.00000000222, 2.23360866067, 2435.15573003500),
    (0.00000000175, 0.04701598422, 107.75864066460),
    (0.00000000171, 5.02500742690, 93.53154666300),
    (0.00000000184, 5.19723697138, 835.78789401270),
    (0.00000000221, 4.49141283681, 913.00012679230),
    (0.00000000195, 0.92088046109, 551.03160609700),
    (0.00000000166, 5.01778115937, 354.99798604640),
    (0.00000000165, 2.26267552932, 406.95447090300),
    (0.00000000189, 0.31221126958, 420.96911658350),
    (0.00000000196, 2.70333585839, 774.48262992160),
    (0.00000000176, 6.12029409039, 181.80652604900),
    (0.00000000172, 1.94132177757, 3259.89792378380),
    (0.00000000160, 0.55319954265, 5429.87946823940),
    (0.00000000161, 2.88623631474, 184.84490743480),
    (0.00000000192, 0.26639534884, 295.19424100610),
    (0.00000000167, 3.71345214172, 1056.20053645150),
    (0.00000000195, 4.83926717598, 1596.18644228460),
    (0.00000000156, 2.81916058733, 428.08266358430),
    (0.00000000215, 1.88276472005, 220.36445832900),
    (0.00000000167, 2.68872854428, 423.67742956920),
    (0.00000000154, 1.66553954375, 115.62294719080),
    (0.00000000175, 0.20216461467, 384.05992122310),
    (0.00000000201, 4.38095931887, 418.00017116690),
    (0.00000000167, 1.86485857353, 393.46109008430),
    (0.00000000155, 0.92480392431, 282.66406803390),
    (0.00000000146, 1.97663966745, 9360.08916445900),
    (0.00000000160, 2.62483919699, 353.30106501700),
    (0.00000000186, 1.37307151419, 292.01284726840),
    (0.00000000198, 1.15631374887, 2957.73314812880),
    (0.00000000144, 4.82956915076, 453.42489381900),
    (0.00000000149, 3.60682821788, 205.66428357540),
    (0.00000000147, 4.48377791879, 81.89514556810),
    (0.00000000147, 5.74795037748, 856.37777548970),
    (0.00000000142, 3.53823120158, 212.02707105080),
    (0.00000000140, 0.70476909062, 640.86049416050),
    (0.00000000139, 1.39047667205, 1261.63532536330),
    (0.00000000153, 3.29559426243, 391.17346822390),
    (0.00000000158, 1.79872341304, 326.68681039510),
    (0.00000000174, 3.98677435872, 1049.08698945070),
    (0.00000000171, 4.16825100469, 213.03846300710),
    (0.00000000133, 4.74095454922, 0.04818410980),
    (0.00000000155, 5.32313618730, 2015.67108615980),
    (0.00000000158, 2.67557086253, 2531.13495725280),
    (0.00000000158, 4.64622526567, 427.34895040140),
    (0.00000000123, 2.20103444636, 210.59078245230),
    (0.00000000160, 1.85888551524, 201.51968199120),
    (0.00000000119, 3.12572799769, 238.57188970350),
    (0.00000000120, 4.62897224203, 203.26478713040),
    (0.00000000129, 4.92592016162, 1286.90811962880),
    (0.00000000132, 3.44682160054, 156.67674413540),
    (0.00000000143, 0.67951827513, 425.84743135060),
    (0.00000000114, 5.46519773276, 552.58551477450),
    (0.00000000132, 1.76335093671, 432.01481684740),
    (0.00000000113, 0.68933513038, 450.97721326420),
    (0.00000000128, 2.13986068877, 2751.54759969160),
    (0.00000000123, 4.59695145319, 216.00740842370),
    (0.00000000119, 1.04688666457, 462.02291352810),
    (0.00000000108, 5.36873170289, 3377.21779200400),
    (0.00000000142, 6.24626256472, 299.12639426920),
    (0.00000000118, 0.63448253510, 369.97583957340),
    (0.00000000105, 2.31570619675, 200.55647414470),
    (0.00000000124, 1.87110815140, 850.01498801430),
    (0.00000000106, 0.55623662570, 114.39910691340),
    (0.00000000102, 3.95315219638, 361.37781986430),
    (0.00000000095, 4.10658529323, 10213.28554621100),
    (0.00000000097, 1.13534710734, 387.24131496080),
    (0.00000000096, 4.46689094543, 401.32539661050),
    (0.00000000119, 2.33636675091, 318.83955021140),
    (0.00000000115, 3.37508073115, 313.94418910180),
    (0.00000000106, 3.73586211650, 220.93390730060),
    (0.00000000090, 0.59788492023, 227.31374111850),
    (0.00000000103, 5.09172929383, 213.45915413240),
    (0.00000000097, 5.95268532215, 1044.40407666220),
    (0.00000000103, 1.70625660572, 213.13903674360),
    (0.00000000080, 0.86872596168, 233.90602325750),
    (0.00000000089, 5.35990932230, 214.19286731530),
    (0.00000000080, 2.69565238975, 540.73666535850),
    (0.00000000095, 1.19504849611, 460.53844081980),
    (0.00000000105, 0.58624363205, 481.73606947030),
    (0.00000000099, 2.68841109007, 219.89137757700),
    (0.00000000098, 1.59923557478, 484.70501488690),
    (0.00000000081, 1.12279793521, 420.44785172170),
    (0.00000000075, 4.58892231446, 394.35486196160),
    (0.00000000099, 4.68895851750, 448.68959140380),
    (0.00000000076, 1.66929798365, 196.03362005060),
    (0.00000000087, 3.12477195090, 857.12853501510),
    (0.00000000078, 5.59819387460, 364.34676528090),
    (0.00000000079, 3.53267171729, 969.62247809490),
)

L2 = (
    (0.00116441181, 1.17987850633, 7.11354700080),
    (0.00091920844, 0.07425261094, 213.29909543800),
    (0.00090592251, 0.00000000000, 0.00000000000),
    (0.00015276909, 4.06492007503, 206.18554843720),
    (0.00010631396, 0.25778277414, 220.41264243880),
    (0.00010604979, 5.40963595885, 426.59819087600),
    (0.00004265368, 1.04595556630, 14.22709400160),
    (0.00001215527, 2.91860042123, 103.09277421860),
    (0.00001164684, 4.60942128971, 639.89728631400),
    (0.00001081967, 5.69130351670, 433.71173787680),
    (0.00001020079, 0.63369182642, 3.18139373770),
    (0.00001044754, 4.04206453611, 199.07200143640),
    (0.00000633582, 4.38825410036, 419.48464387520),
    (0.00000549329, 5.57303134242, 3.93215326310),
    (0.00000456914, 1.26840971349, 110.20632121940),
    (0.00000425100, 0.20935499279, 227.52618943960),
    (0.00000273739, 4.28841011784, 95.97922721780),
    (0.00000161571, 1.38139149420, 11.04570026390),
    (0.00000129494, 1.56586884170, 309.27832265580),
    (0.00000117008, 3.88120915956, 853.19638175200),
    (0.00000105415, 4.90003203599, 647.01083331480),
    (0.00000100967, 0.89270493100, 21.34064100240),
    (0.00000095227, 5.62561150598, 412.37109687440),
    (0.00000081948, 1.02477558315, 117.31986822020),
    (0.00000074857, 4.76178468163, 210.11770170030),
    (0.00000082727, 6.05030934786, 216.48048917570),
    (0.00000095659, 2.91093561539, 316.39186965660),
    (0.00000063696, 0.35179804917, 323.50541665740),
    (0.00000084860, 5.73472777961, 209.36694217490),
    (0.00000060647, 4.87517850190, 632.78373931320),
    (0.00000066459, 0.48297940601, 10.29494073850),
    (0.00000067184, 0.45648612616, 522.57741809380),
    (0.00000053281, 2.74730541387, 529.69096509460),
    (0.00000045827, 5.69296621745, 440.82528487760),
    (0.00000045293, 1.66856699796, 202.25339517410),
    (0.00000042330, 5.70768187703, 88.86568021700),
    (0.00000032140, 0.07050050346, 63.73589830340),
    (0.00000031573, 1.67190022213, 302.16477565500),
    (0.00000031150, 4.16379537691, 191.95845443560),
    (0.00000024631, 5.65564728570, 735.87651353180),
    (0.00000026558, 0.83256214407, 224.34479570190),
    (0.00000020108, 5.94364609981, 217.23124870110),
    (0.00000017511, 4.90014736798, 625.67019231240),
    (0.00000017130, 1.62593421274, 742.99006053260),
    (0.00000013744, 3.76497167300, 195.13984817330),
    (0.00000012236, 4.71789723976, 203.00415469950),
    (0.00000011940, 0.12620714199, 234.63973644040),
    (0.00000016040, 0.57886320845, 515.46387109300),
    (0.00000011154, 5.92216844780, 536.80451209540),
    (0.00000014068, 0.20675293700, 838.96928775040),
    (0.00000011013, 5.60207982774, 728.76296653100),
    (0.00000011718, 3.12098483554, 846.08283475120),
    (0.00000009962, 4.15472049127, 860.30992875280),
    (0.00000010601, 3.20327613035, 1066.49547719000),
    (0.00000010072, 0.25709351996, 330.61896365820),
    (0.00000009490, 0.46379969328, 956.28915597060),
    (0.00000010240, 4.98736656070, 422.66603761290),
    (0.00000008287, 2.13990364272, 269.92144674060),
    (0.00000007238, 5.39724715258, 1052.26838318840),
    (0.00000007730, 5.24602742309, 429.77958461370),
    (0.00000006353, 4.46211130731, 284.14854074220),
    (0.00000005935, 5.40967847103, 149.56319713460),
    (0.00000007550, 4.03401153929, 9.56122755560),
    (0.00000005779, 4.29380891110, 415.55249061210),
    (0.00000006082, 5.93416924841, 405.25754987360),
    (0.00000005711, 0.01824076994, 124.43341522100),
    (0.00000005676, 6.02235682150, 223.59403617650),
    (0.00000004757, 4.92804854717, 654.12438031560),
    (0.00000004727, 2.27461984667, 18.15924726470),
    (0.00000004509, 4.40688707557, 942.06206196900),
    (0.00000005621, 0.29694719379, 127.47179660680),
    (0.00000005453, 5.53868222772, 949.17560896980),
    (0.00000004130, 4.68673560379, 74.78159856730),
    (0.00000004098, 5.30851262200, 1045.15483618760),
    (0.00000004223, 2.89014939299, 56.62235130260),
    (0.00000004887, 3.20022991216, 277.03499374140),
    (0.00000003905, 3.30270187305, 490.33408917940),
    (0.00000003923, 6.09732996823, 81.75213321620),
    (0.00000003755, 4.93065184796, 52.69019803950),
    (0.00000004602, 6.13908576681, 1155.36115740700),
    (0.00000003714, 0.40648076787, 137.03302416240),
    (0.00000003407, 4.28514461015, 99.91138048090),
    (0.00000003579, 0.20402442077, 1272.68102562720),
    (0.00000003946, 0.36500928968, 12.53017297220),
    (0.00000003246, 1.56761884227, 1059.38193018920),
    (0.00000004063, 0.29084229143, 831.85574074960),
    (0.00000003688, 0.15467406177, 437.64389113990),
    (0.00000002895, 3.13473183482, 70.84944530420),
    (0.00000002800, 0.32727938074, 191.20769491020),
    (0.00000002672, 1.87612402267, 295.05122865420),
    (0.00000003454, 4.77197610696, 423.41679713830),
    (0.00000002623, 5.15237415384, 1368.66025284500),
    (0.00000002457, 3.89612890177, 210.85141488320),
    (0.00000002461, 1.58522876760, 32.24332891440),
    (0.00000002595, 3.59007068361, 131.40394986990),
    (0.00000002289, 4.76825865118, 351.81659230870),
    (0.00000002357, 5.83099000562, 106.27416795630),
    (0.00000002221, 5.98277491515, 6062.66320755260),
    (0.00000002221, 2.05930402282, 6076.89030155420),
    (0.00000002183, 5.94985336393, 145.63104387150),
    (0.00000002718, 3.37801252354, 408.43894361130),
    (0.00000002288, 3.14000619320, 22.09140052780),
    (0.00000002090, 1.12304173562, 9992.87290377220),
    (0.00000002089, 3.48276230686, 10007.09999777380),
    (0.00000002570, 5.12167203704, 265.98929347750),
    (0.00000001835, 4.15379879659, 1258.45393162560),
    (0.00000001820, 5.05340615445, 1361.54670584420),
    (0.00000001760, 4.13532689228, 107.02492748170),
    (0.00000001921, 4.51790997496, 138.51749687070),
    (0.00000001707, 1.35864593280, 231.45834270270),
    (0.00000001956, 5.87006093798, 1471.75302706360),
    (0.00000002133, 5.23409848720, 1265.56747862640),
    (0.00000001595, 5.61962698786, 447.93883187840),
    (0.00000001609, 3.74893709671, 628.85158605010),
    (0.00000001490, 0.48352404940, 340.77089204480),
    (0.00000001560, 5.97095003614, 430.53034413910),
    (0.00000001352, 0.71405348653, 28.45418800320),
    (0.00000001355, 2.91219493604, 215.74677599280),
    (0.00000001298, 5.84254169775, 543.91805909620),
    (0.00000001664, 6.23834873469, 1148.24761040620),
    (0.00000001205, 2.83373725021, 200.76892246580),
    (0.00000001192, 3.52219428945, 497.44763618020),
    (0.00000001122, 2.60571030270, 1279.79457262800),
    (0.00000001217, 6.23528359211, 1589.07289528380),
    (0.00000001420, 0.85079202155, 6069.77675455340),
    (0.00000001120, 4.95656566453, 1685.05212250160),
    (0.00000001010, 3.39689646619, 1073.60902419080),
    (0.00000001352, 2.27575429523, 9999.98645077300),
    (0.00000000979, 1.58571463442, 1375.77379984580),
    (0.00000001159, 0.71823181781, 508.35032409220),
    (0.00000001014, 2.40759054741, 703.63318461740),
    (0.00000000956, 2.66256831556, 134.58534360760),
    (0.00000001110, 1.19713920197, 618.55664531160),
    (0.00000000945, 4.68155456977, 362.86229257260),
    (0.00000000953, 4.20749172571, 288.08069400530),
    (0.00000001033, 1.08781255146, 184.84490743480),
    (0.00000000942, 2.43465223460, 222.86032299360),
    (0.00000000909, 4.51769385360, 38.13303563780),
    (0.00000001002, 1.38543153271, 483.22054217860),
    (0.00000001082, 4.52832816548, 635.96513305090),
    (0.00000001008, 4.91325851448, 750.10360753340),
    (0.00000000862, 4.79998518474, 1677.93857550080),
    (0.00000000828, 2.21940849017, 333.65734504400),
    (0.00000000745, 3.97279299984, 1574.84580128220),
    (0.00000000903, 5.58963782799, 1788.14489672020),
    (0.00000000735, 2.28191723259, 1162.47470440780),
    (0.00000000773, 5.82270096882, 416.30325013750),
    (0.00000000734, 2.35356586018, 120.35824960600),
    (0.00000000745, 4.84266000843, 76.26607127560),
    (0.00000000765, 2.50840146722, 343.21857259960),
    (0.00000000908, 5.01046293458, 1581.95934828300),
    (0.00000000707, 3.66631544506, 347.88443904560),
    (0.00000000870, 0.77106152694, 113.38771495710),
    (0.00000000686, 2.88543836068, 92.04707395470),
    (0.00000000673, 3.75650667651, 203.73786788240),
    (0.00000000656, 3.77718582702, 217.96496188400),
    (0.00000000675, 5.62875135263, 17.26547538740),
    (0.00000000691, 0.21330089609, 99.16062095550),
    (0.00000000786, 4.49318079175, 643.07868005170),
    (0.00000000641, 0.67588390141, 46.47042291600),
    (0.00000000663, 5.74837848383, 721.64941953020),
    (0.00000000809, 5.94893988352, 1464.63948006280),
    (0.00000000638, 4.86195439622, 357.44566660120),
    (0.00000000740, 6.00053422445, 337.73251065900),
    (0.00000000555, 4.95858934298, 358.93013930950),
    (0.00000000581, 3.87669679805, 565.11568774670),
    (0.00000000541, 1.22296838713, 62.25142559510),
    (0.00000000697, 0.00715950269, 1169.58825140860),
    (0.00000000524, 1.53830423608, 195.89060769870),
    (0.00000000518, 5.41992758537, 312.19908396260),
    (0.00000000626, 5.26580317026, 436.89313161450),
    (0.00000000537, 6.17031657600, 182.27960680100),
    (0.00000000574, 5.98607898826, 1905.46476494040),
    (0.00000000541, 0.30589337713, 98.89998852460),
    (0.00000000603, 3.26888470585, 208.63322899200),
    (0.00000000504, 3.80930996688, 168.05251279940),
    (0.00000000477, 3.56642391994, 563.63121503840),
    (0.00000000511, 4.70719837179, 2001.44399215820),
    (0.00000000475, 1.06025557585, 5856.47765911540),
    (0.00000000540, 0.87230551412, 1692.16566950240),
    (0.00000000454, 2.48128029368, 9786.68735533500),
    (0.00000000456, 3.18303484133, 218.92816973050),
    (0.00000000462, 0.71358186864, 258.87574647670),
    (0.00000000424, 4.89778948357, 636.71589257630),
    (0.00000000537, 2.59376221736, 313.21047591890),
    (0.00000000410, 4.22147787617, 867.42347575360),
    (0.00000000408, 3.06057772788, 424.15051032120),
    (0.00000000407, 3.79376013938, 24.37902238820),
    (0.00000000569, 3.68547825941, 350.33211960040),
    (0.00000000404, 0.91401255827, 114.13847448250),
    (0.00000000395, 3.50478374207, 129.91947716160),
    (0.00000000395, 2.86309689622, 212.33588759150),
    (0.00000000386, 5.00762729432, 388.46515523820),
    (0.00000000393, 6.26835522096, 241.75328344120),
    (0.00000000401, 4.60258908692, 1994.33044515740),
    (0.00000000385, 0.91582119643, 160.60889739850),
    (0.00000000467, 0.54876489832, 404.50679034820),
    (0.00000000368, 0.35674031808, 214.26230328450),
    (0.00000000471, 0.67360047481, 207.88246946660),
    (0.00000000379, 0.92901327825, 767.36908292080),
    (0.00000000420, 5.69797398044, 225.82926841020),
    (0.00000000356, 3.10092792842, 842.15068148810),
    (0.00000000428, 5.35375368944, 2104.53676637680),
    (0.00000000422, 2.67975581832, 77.96299230500),
    (0.00000000370, 5.46144813372, 1038.04128918680),
    (0.00000000379, 5.56429091578, 131.54696222180),
    (0.00000000441, 5.68196668399, 1781.03134971940),
    (0.00000000361, 5.20616019966, 629.60234557550),
    (0.00000000341, 5.92928351979, 26.82670294300),
    (0.00000000419, 5.26851686707, 85.82729883120),
    (0.00000000322, 0.80223983857, 6283.07584999140),
    (0.00000000323, 3.86700993914, 576.16138801060),
    (0.00000000321, 2.17186032970, 10213.28554621100),
    (0.00000000355, 2.80560859177, 344.70304530790),
    (0.00000000311, 3.77477255556, 1891.23767093880),
    (0.00000000318, 5.22020784209, 142.44965013380),
    (0.00000000315, 0.52272202855, 5849.36411211460),
    (0.00000000428, 4.63722058283, 1898.35121793960),
    (0.00000000337, 0.68198429948, 45.57665103870),
    (0.00000000316, 0.54074780109, 444.75743814070),
    (0.00000000310, 1.41032075652, 273.10284047830),
    (0.00000000311, 3.53744556230, 251.43213107580),
    (0.00000000295, 1.93253015677, 436.15941843160),
    (0.00000000296, 1.97705648834, 9779.57380833420),
    (0.00000000326, 3.67854047003, 963.40270297140),
    (0.00000000389, 5.76841276132, 39.35687591520),
    (0.00000000277, 5.73995694175, 92.79783348010),
    (0.00000000315, 4.96371610197, 757.21715453420),
    (0.00000000295, 1.81638833900, 1493.09366806600),
    (0.00000000287, 0.97698377929, 685.47393735270),
    (0.00000000281, 2.66463042095, 1286.90811962880),
    (0.00000000330, 5.79776922760, 650.94298657790),
    (0.00000000292, 3.97858181479, 472.17484191470),
    (0.00000000266, 4.13716111320, 601.76425067620),
    (0.00000000262, 0.91887592474, 245.54242435240),
    (0.00000000278, 3.08964256591, 778.41478318470),
    (0.00000000277, 3.08750916880, 621.73803904930),
    (0.00000000255, 3.93981592051, 181.05576652360),
    (0.00000000333, 2.04835822938, 561.18353448360),
    (0.00000000247, 2.92754257675, 219.44943459230),
    (0.00000000306, 0.36127922606, 824.74219374880),
    (0.00000000253, 1.80130756458, 5643.17856367740),
    (0.00000000337, 4.97764462199, 175.16605980020),
    (0.00000000273, 0.66599369335, 2008.55753915900),
    (0.00000000227, 4.87285356383, 661.23792731640),
    (0.00000000249, 3.14202895058, 144.14657116320),
    (0.00000000220, 3.93526603081, 319.57326339430),
    (0.00000000212, 5.85248164087, 546.95644048200),
    (0.00000000234, 1.65314711167, 554.06998748280),
    (0.00000000204, 0.88373842674, 31.49256938900),
    (0.00000000205, 2.93169866171, 1596.18644228460),
    (0.00000000201, 3.36504567824, 1080.72257119160),
    (0.00000000224, 4.34612745705, 1382.88734684660),
    (0.00000000192, 5.13697232918, 329.72519178090),
    (0.00000000208, 3.08549771485, 41.64449777560),
    (0.00000000236, 0.07998742860, 1141.13406340540),
    (0.00000000203, 4.13011580915, 2627.11418447060),
    (0.00000000203, 0.13969067385, 1485.98012106520),
    (0.00000000204, 3.38137545713, 699.70103135430),
    (0.00000000212, 4.52370676085, 2310.72231481400),
    (0.00000000218, 5.79277335862, 2221.85663459700),
    (0.00000000213, 0.50441377637, 934.94851496820),
    (0.00000000210, 5.04017633795, 2420.92863603340),
    (0.00000000214, 4.64286758581, 2317.83586181480),
    (0.00000000178, 0.84588580004, 128.36556848410),
    (0.00000000170, 2.75006619605, 710.74673161820),
    (0.00000000171, 4.32615182967, 291.26208774300),
    (0.00000000172, 3.46971306920, 501.37978944330),
    (0.00000000170, 1.05408992106, 526.50957135690),
    (0.00000000162, 1.15683042950, 519.39602435610),
    (0.00000000180, 4.96266204107, 1670.82502850000),
    (0.00000000172, 1.65385549578, 916.93228005540),
    (0.00000000170, 2.30821101766, 429.04587143080),
    (0.00000000170, 5.98716489326, 643.82943957710),
    (0.00000000173, 5.19933564968, 1354.43315884340),
    (0.00000000195, 4.50165508529, 2214.74308759620),
    (0.00000000156, 4.16290662749, 572.22923474750),
    (0.00000000153, 1.23776248578, 2413.81508903260),
    (0.00000000150, 0.63076983213, 1478.86657406440),
    (0.00000000169, 4.28090123029, 305.34616939270),
    (0.00000000174, 6.23077892653, 3384.33133900480),
    (0.00000000149, 3.13274908516, 9573.38825989700),
    (0.00000000162, 6.25601818345, 213.25091132820),
    (0.00000000149, 4.81749019484, 945.99421523210),
    (0.00000000162, 0.88610129190, 216.21985674480),
    (0.00000000133, 2.31915371262, 156.67674413540),
    (0.00000000165, 6.06456216591, 732.69511979410),
    (0.00000000141, 6.14293754333, 1795.25844372100),
    (0.00000000133, 0.06530337135, 218.71572140940),
    (0.00000000162, 3.17058130506, 213.34727954780),
    (0.00000000125, 2.07143636845, 425.11371816770),
    (0.00000000146, 1.88627500632, 211.81462272970),
    (0.00000000113, 2.79541965778, 235.39049596580),
    (0.00000000117, 0.76464798684, 479.28838891550),
    (0.00000000108, 3.95650672786, 570.74476203920),
    (0.00000000106, 0.12820734703, 188.02630117250),
    (0.00000000134, 3.58244908862, 849.26422848890),
    (0.00000000114, 0.25990388555, 398.14400287280),
    (0.00000000112, 2.39181495831, 217.49188113200),
    (0.00000000091, 2.50716605179, 121.25202148330),
    (0.00000000091, 1.75367948574, 213.82036029980),
    (0.00000000088, 5.26121947108, 395.57870223900),
    (0.00000000096, 3.98832609364, 289.56516671360),
    (0.00000000091, 0.35318362186, 312.45971639350),
    (0.00000000112, 1.14387590923, 1802.37199072180),
    (0.00000000082, 3.73605217214, 207.67002114550),
    (0.00000000082, 6.06283262812, 210.37833413120),
    (0.00000000084, 3.34470673492, 67.66805156650),
    (0.00000000086, 2.73917300180, 5863.59120611620),
    (0.00000000083, 2.81499116485, 776.93031047640),
    (0.00000000091, 1.26160093170, 212.77783057620),
    (0.00000000090, 2.08722491981, 2111.65031337760),
    (0.00000000080, 2.13136842916, 421.93232443000),
    (0.00000000082, 4.16358350281, 9793.80090233580),
    (0.00000000077, 2.96973341607, 431.26405732200),
    (0.00000000079, 3.42790361067, 417.03696332040),
    (0.00000000079, 3.18693585419, 320.32402291970),
    (0.00000000080, 0.78975763683, 204.70107572890),
    (0.00000000077, 1.89354243952, 556.51766803760),
    (0.00000000073, 4.85923277221, 2118.76386037840),
    (0.00000000071, 3.64551577433, 198.32124191100),
)

L3 = (
    (0.00016038734, 5.73945377424, 7.11354700080),
    (0.00004249793, 4.58539675603, 213.29909543800),
    (0.00001906524, 4.76082050205, 220.41264243880),
    (0.00001465687, 5.91326678323, 206.18554843720),
    (0.00001162041, 5.61973132428, 14.22709400160),
    (0.00001066581, 3.60816533142, 426.59819087600),
    (0.00000239377, 3.86088273439, 433.71173787680),
    (0.00000236975, 5.76826451465, 199.07200143640),
    (0.00000165641, 5.11641150216, 3.18139373770),
    (0.00000131409, 4.74327544615, 227.52618943960),
    (0.00000151352, 2.73594641861, 639.89728631400),
    (0.00000061630, 4.74287052463, 103.09277421860),
    (0.00000063365, 0.22850089497, 419.48464387520),
    (0.00000040437, 5.47298059144, 21.34064100240),
    (0.00000040205, 5.96420266720, 95.97922721780),
    (0.00000038746, 5.83386199529, 110.20632121940),
    (0.00000028025, 3.01235311514, 647.01083331480),
    (0.00000025029, 0.98808170740, 3.93215326310),
    (0.00000018101, 1.02506397063, 412.37109687440),
    (0.00000017879, 3.31913418974, 309.27832265580),
    (0.00000016208, 3.89825272754, 440.82528487760),
    (0.00000015763, 5.61667809625, 117.31986822020),
    (0.00000019014, 1.91614237463, 853.19638175200),
    (0.00000018262, 4.96738415934, 10.29494073850),
    (0.00000012947, 1.18068953942, 88.86568021700),
    (0.00000017919, 4.20376505349, 216.48048917570),
    (0.00000011453, 5.57520615096, 11.04570026390),
    (0.00000010548, 5.92906266269, 191.95845443560),
    (0.00000010389, 3.94838736947, 209.36694217490),
    (0.00000008650, 3.39335369698, 302.16477565500),
    (0.00000007580, 4.87736913157, 323.50541665740),
    (0.00000006697, 0.38198725552, 632.78373931320),
    (0.00000005864, 1.05621157685, 210.11770170030),
    (0.00000005449, 4.64268475485, 234.63973644040),
    (0.00000006327, 2.25492722762, 522.57741809380),
    (0.00000003602, 2.30677010956, 515.46387109300),
    (0.00000003229, 2.20309400066, 860.30992875280),
    (0.00000003701, 3.14159265359, 0.00000000000),
    (0.00000002583, 4.93447677059, 224.34479570190),
    (0.00000002543, 0.42393884183, 625.67019231240),
    (0.00000002213, 3.19814958289, 202.25339517410),
    (0.00000002421, 4.76621391814, 330.61896365820),
    (0.00000002850, 0.58604395010, 529.69096509460),
    (0.00000001965, 4.39525359412, 124.43341522100),
    (0.00000002154, 1.35488209144, 405.25754987360),
    (0.00000002296, 3.34809165905, 429.77958461370),
    (0.00000002018, 3.06693569701, 654.12438031560),
    (0.00000001979, 1.02981005658, 728.76296653100),
    (0.00000001868, 3.09383546177, 422.66603761290),
    (0.00000001846, 4.15225985450, 536.80451209540),
    (0.00000002194, 1.18918501013, 1066.49547719000),
    (0.00000002090, 4.15631351317, 223.59403617650),
    (0.00000001481, 0.37916705169, 316.39186965660),
    (0.00000001720, 5.82865773356, 195.13984817330),
    (0.00000001460, 1.57663426355, 81.75213321620),
    (0.00000001623, 6.03706764648, 742.99006053260),
    (0.00000001286, 1.66154726117, 63.73589830340),
    (0.00000001304, 5.02409881054, 956.28915597060),
    (0.00000001446, 2.10575519127, 838.96928775040),
    (0.00000001245, 3.88109752770, 269.92144674060),
    (0.00000001018, 3.72599601656, 295.05122865420),
    (0.00000001323, 1.38492882986, 735.87651353180),
    (0.00000001318, 2.33460998999, 217.23124870110),
    (0.00000000943, 2.75813531246, 284.14854074220),
    (0.00000000906, 0.71155526266, 846.08283475120),
    (0.00000000886, 3.83754799777, 447.93883187840),
    (0.00000000943, 3.31480217015, 18.15924726470),
    (0.00000000800, 4.71386673963, 56.62235130260),
    (0.00000000908, 2.02119147951, 831.85574074960),
    (0.00000000787, 0.80410269937, 1045.15483618760),
    (0.00000000709, 4.27064410504, 437.64389113990),
    (0.00000000651, 6.17565900032, 942.06206196900),
    (0.00000000785, 2.40767785311, 203.00415469950),
    (0.00000000702, 1.64585301418, 423.41679713830),
    (0.00000000543, 2.86326941725, 184.84490743480),
    (0.00000000532, 6.25762144463, 1059.38193018920),
    (0.00000000521, 3.43013038466, 149.56319713460),
    (0.00000000484, 4.88366060720, 1272.68102562720),
    (0.00000000437, 5.40220619672, 408.43894361130),
    (0.00000000388, 2.57589594168, 508.35032409220),
    (0.00000000421, 4.05836524024, 543.91805909620),
    (0.00000000375, 1.22747948298, 2324.94940881560),
    (0.00000000347, 0.59237194522, 22.09140052780),
    (0.00000000433, 1.69090148012, 1155.36115740700),
    (0.00000000389, 1.46170367972, 1073.60902419080),
    (0.00000000307, 1.82185086955, 628.85158605010),
    (0.00000000409, 1.21858750514, 1052.26838318840),
    (0.00000000309, 0.33610530663, 6076.89030155420),
    (0.00000000309, 1.42279282226, 6062.66320755260),
    (0.00000000340, 1.83325770310, 1141.13406340540),
    (0.00000000303, 2.41584747330, 127.47179660680),
    (0.00000000305, 5.34154702988, 131.40394986990),
    (0.00000000298, 2.28594631393, 635.96513305090),
    (0.00000000372, 1.03723911390, 313.21047591890),
    (0.00000000338, 0.69100012338, 1361.54670584420),
    (0.00000000325, 1.78816356937, 1148.24761040620),
    (0.00000000322, 1.18628805010, 721.64941953020),
    (0.00000000271, 2.45663156460, 415.55249061210),
    (0.00000000251, 3.12046701975, 1382.88734684660),
    (0.00000000254, 3.00353256829, 618.55664531160),
    (0.00000000295, 0.35280179538, 2730.20695868920),
    (0.00000000242, 1.52154324392, 70.84944530420),
    (0.00000000296, 0.89576757167, 2104.53676637680),
    (0.00000000264, 3.00987438634, 661.23792731640),
    (0.00000000267, 0.31623829657, 1677.93857550080),
    (0.00000000270, 2.56774718753, 643.07868005170),
    (0.00000000261, 1.55058302472, 1457.52593306200),
    (0.00000000246, 2.29214585472, 867.42347575360),
    (0.00000000269, 3.18157515051, 750.10360753340),
    (0.00000000272, 1.12208982319, 1788.14489672020),
    (0.00000000256, 0.37673546414, 1279.79457262800),
    (0.00000000206, 1.81129778306, 497.44763618020),
    (0.00000000251, 0.61933213502, 2413.81508903260),
    (0.00000000237, 3.35941544147, 436.89313161450),
    (0.00000000247, 0.10102936687, 99.91138048090),
    (0.00000000247, 0.93125798111, 52.69019803950),
    (0.00000000221, 2.07880035795, 824.74219374880),
    (0.00000000197, 6.16682223437, 1258.45393162560),
    (0.00000000229, 5.57917534840, 2943.50605412720),
    (0.00000000227, 0.43324651601, 2737.32050569000),
    (0.00000000203, 4.12623986247, 337.73251065900),
    (0.00000000214, 3.57607524509, 934.94851496820),
    (0.00000000212, 1.25688162158, 1773.91780271860),
    (0.00000000215, 0.88867647880, 1038.04128918680),
    (0.00000000244, 5.51572084570, 231.45834270270),
    (0.00000000181, 2.13821830481, 416.30325013750),
    (0.00000000210, 4.19139167658, 2221.85663459700),
    (0.00000000178, 2.91685344537, 74.78159856730),
    (0.00000000201, 0.46214583002, 2854.64037391020),
    (0.00000000236, 4.64388694899, 1905.46476494040),
    (0.00000000199, 1.54991619669, 1471.75302706360),
    (0.00000000199, 0.70725247497, 2420.92863603340),
    (0.00000000162, 2.51488345020, 430.53034413910),
    (0.00000000160, 1.23508694599, 1596.18644228460),
    (0.00000000175, 4.14605894816, 2090.30967237520),
    (0.00000000152, 0.05796022559, 32.24332891440),
    (0.00000000176, 1.29002070623, 490.33408917940),
    (0.00000000154, 3.60622857548, 650.94298657790),
    (0.00000000185, 4.74969742128, 319.57326339430),
    (0.00000000154, 1.54587199996, 1464.63948006280),
    (0.00000000108, 4.25125786500, 145.63104387150),
    (0.00000000106, 1.04047809351, 1162.47470440780),
    (0.00000000114, 2.64055737100, 362.86229257260),
    (0.00000000093, 3.36746275886, 483.22054217860),
    (0.00000000091, 2.05796248692, 210.85141488320),
    (0.00000000091, 4.53336314765, 241.75328344120),
    (0.00000000072, 3.74361312157, 1485.98012106520),
    (0.00000000076, 3.33892447677, 195.89060769870),
)

L4 = (
    (0.00001661894, 3.99826248978, 7.11354700080),
    (0.00000257107, 2.98436499013, 220.41264243880),
    (0.00000236344, 3.90241428075, 14.22709400160),
    (0.00000149418, 2.74110824208, 213.29909543800),
    (0.00000109598, 1.51515739251, 206.18554843720),
    (0.00000113953, 3.14159265359, 0.00000000000),
    (0.00000068390, 1.72120953337, 426.59819087600),
    (0.00000037699, 1.23795458356, 199.07200143640),
    (0.00000040060, 2.04644897412, 433.71173787680),
    (0.00000031219, 3.01094184090, 227.52618943960),
    (0.00000015111, 0.82897064529, 639.89728631400),
    (0.00000009444, 3.71485300868, 21.34064100240),
    (0.00000005690, 2.41995290633, 419.48464387520),
    (0.00000004470, 1.45120818748, 95.97922721780),
    (0.00000005608, 1.15607095740, 647.01083331480),
    (0.00000004463, 2.11783225176, 440.82528487760),
    (0.00000003229, 4.09278077834, 110.20632121940),
    (0.00000002871, 2.77203153866, 412.37109687440),
    (0.00000002796, 3.00730249564, 88.86568021700),
    (0.00000002638, 0.00255721254, 853.19638175200),
    (0.00000002574, 0.39246854091, 103.09277421860),
    (0.00000001862, 5.07955457727, 309.27832265580),
    (0.00000002225, 3.77689198137, 117.31986822020),
    (0.00000001769, 5.19176876406, 302.16477565500),
    (0.00000001921, 2.82884328662, 234.63973644040),
    (0.00000001805, 2.23816036743, 216.48048917570),
    (0.00000001211, 1.54685246534, 191.95845443560),
    (0.00000000765, 3.44501766503, 323.50541665740),
    (0.00000000763, 4.83197222448, 210.11770170030),
    (0.00000000613, 4.19052656353, 515.46387109300),
    (0.00000000648, 2.28591710303, 209.36694217490),
    (0.00000000616, 4.03194472161, 522.57741809380),
    (0.00000000630, 2.37952532019, 632.78373931320),
    (0.00000000639, 0.29772678242, 860.30992875280),
    (0.00000000559, 2.17110060530, 124.43341522100),
    (0.00000000442, 2.23500083592, 447.93883187840),
    (0.00000000407, 5.44515970990, 1066.49547719000),
    (0.00000000469, 1.26889429317, 654.12438031560),
    (0.00000000488, 3.20329778617, 405.25754987360),
    (0.00000000415, 3.12435410343, 330.61896365820),
    (0.00000000442, 3.38933498625, 81.75213321620),
    (0.00000000332, 4.12464206608, 838.96928775040),
    (0.00000000320, 3.18332026736, 529.69096509460),
    (0.00000000312, 1.40962796637, 429.77958461370),
    (0.00000000291, 3.18885372262, 1464.63948006280),
    (0.00000000333, 2.94355912397, 728.76296653100),
    (0.00000000235, 3.67049647573, 1148.24761040620),
    (0.00000000286, 2.57895004576, 1045.15483618760),
    (0.00000000223, 3.57980034401, 1155.36115740700),
    (0.00000000261, 2.04564143519, 1677.93857550080),
    (0.00000000218, 2.61967125327, 536.80451209540),
    (0.00000000262, 2.48322150677, 625.67019231240),
    (0.00000000191, 4.39064160974, 1574.84580128220),
    (0.00000000176, 1.26161895188, 422.66603761290),
    (0.00000000190, 2.32693171200, 223.59403617650),
    (0.00000000185, 1.08713469614, 742.99006053260),
    (0.00000000168, 0.69946458053, 824.74219374880),
    (0.00000000177, 5.02663339078, 203.00415469950),
    (0.00000000218, 0.40426546037, 867.42347575360),
    (0.00000000178, 3.67593243311, 831.85574074960),
    (0.00000000175, 5.75326979098, 1073.60902419080),
    (0.00000000156, 3.02120117572, 1781.03134971940),
    (0.00000000148, 2.28313808274, 295.05122865420),
    (0.00000000150, 3.48436135302, 956.28915597060),
    (0.00000000152, 1.91404443241, 942.06206196900),
    (0.00000000146, 6.16519696640, 316.39186965660),
    (0.00000000096, 2.93247663741, 224.34479570190),
    (0.00000000088, 4.48383632427, 423.41679713830),
)

L5 = (
    (0.00000123615, 2.25923345732, 7.11354700080),
    (0.00000034190, 2.16250652689, 14.22709400160),
    (0.00000027546, 1.19868150215, 220.41264243880),
    (0.00000005818, 1.21584270184, 227.52618943960),
    (0.00000005318, 0.23550400093, 433.71173787680),
    (0.00000003677, 6.22669694355, 426.59819087600),
    (0.00000003057, 2.97372046322, 199.07200143640),
    (0.00000002861, 4.28710932685, 206.18554843720),
    (0.00000001617, 6.25265362286, 213.29909543800),
    (0.00000001279, 5.27612561266, 639.89728631400),
    (0.00000000932, 5.56741549127, 647.01083331480),
    (0.00000000756, 6.17716234487, 191.95845443560),
    (0.00000000760, 0.69475544472, 302.16477565500),
    (0.00000001038, 0.23516951637, 440.82528487760),
    (0.00000001007, 3.14159265359, 0.00000000000),
    (0.00000000549, 4.87733288264, 88.86568021700),
    (0.00000000504, 4.77955496203, 419.48464387520),
    (0.00000000346, 4.31847547394, 853.19638175200),
    (0.00000000392, 5.69922389094, 654.12438031560),
    (0.00000000242, 2.05052677361, 323.50541665740),
    (0.00000000266, 1.11384528244, 234.63973644040),
    (0.00000000199, 0.88505901097, 309.27832265580),
    (0.00000000258, 5.10074489186, 95.97922721780),
    (0.00000000166, 2.40063312194, 515.46387109300),
    (0.00000000155, 4.70433216164, 860.30992875280),
    (0.00000000089, 1.36371070380, 412.37109687440),
    (0.00000000102, 0.49450039082, 117.31986822020),
)

B0 = (
    (0.04330678040, 3.60284428399, 213.29909543800),
    (0.00240348303, 2.85238489390, 426.59819087600),
    (0.00084745939, 0.00000000000, 0.00000000000),
    (0.00030863357, 3.48441504465, 220.41264243880),
    (0.00034116063, 0.57297307844, 206.18554843720),
    (0.00014734070, 2.11846597870, 639.89728631400),
    (0.00009916668, 5.79003189405, 419.48464387520),
    (0.00006993564, 4.73604689179, 7.11354700080),
    (0.00004807587, 5.43305315602, 316.39186965660),
    (0.00004788392, 4.96512927420, 110.20632121940),
    (0.00003432125, 2.73255752123, 433.71173787680),
    (0.00001506129, 6.01304536144, 103.09277421860),
    (0.00001060298, 5.63099292414, 529.69096509460),
    (0.00000969071, 5.20434966103, 632.78373931320),
    (0.00000942050, 1.39646678088, 853.19638175200),
    (0.00000707645, 3.80302329547, 323.50541665740),
    (0.00000552313, 5.13149109045, 202.25339517410),
    (0.00000399675, 3.35891413961, 227.52618943960),
    (0.00000316063, 1.99716764199, 647.01083331480),
    (0.00000319380, 3.62571550980, 209.36694217490),
    (0.00000284494, 4.88648481625, 224.34479570190),
    (0.00000314225, 0.46510272410, 217.23124870110),
    (0.00000236442, 2.13887472281, 11.04570026390),
    (0.00000215354, 5.94982610103, 846.08283475120),
    (0.00000208522, 2.12003893769, 415.55249061210),
    (0.00000178958, 2.95361514672, 63.73589830340),
    (0.00000207213, 0.73021462851, 199.07200143640),
    (0.00000139140, 1.99821990940, 735.87651353180),
    (0.00000134884, 5.24500819605, 742.99006053260),
    (0.00000140585, 0.64417620299, 490.33408917940),
    (0.00000121669, 3.11537140876, 522.57741809380),
    (0.00000139240, 4.59535168021, 14.22709400160),
    (0.00000115524, 3.10891547171, 216.48048917570),
    (0.00000114218, 0.96261442133, 210.11770170030),
    (0.00000096376, 4.48164339766, 117.31986822020),
    (0.00000080593, 1.31692750150, 277.03499374140),
    (0.00000072952, 3.05988482370, 536.80451209540),
    (0.00000069261, 4.92378633635, 309.27832265580),
    (0.00000074302, 2.89376539620, 149.56319713460),
    (0.00000068040, 2.18002263974, 351.81659230870),
    (0.00000061734, 0.67728106562, 1066.49547719000),
    (0.00000056598, 2.60963391288, 440.82528487760),
    (0.00000048864, 5.78725874107, 95.97922721780),
    (0.00000048243, 2.18211837430, 74.78159856730),
    (0.00000038304, 5.29151303843, 1059.38193018920),
    (0.00000036323, 1.63348365121, 628.85158605010),
    (0.00000035055, 1.71279210041, 1052.26838318840),
    (0.00000034270, 2.45740470599, 422.66603761290),
    (0.00000034313, 5.97994514798, 412.37109687440),
    (0.00000033787, 1.14073392951, 949.17560896980),
    (0.00000031633, 4.14722153007, 437.64389113990),
    (0.00000036833, 6.27769966148, 1162.47470440780),
    (0.00000026980, 1.27154816810, 860.30992875280),
    (0.00000023516, 2.74936525342, 838.96928775040),
    (0.00000023460, 0.98962849901, 210.85141488320),
    (0.00000023600, 4.11386961467, 3.93215326310),
    (0.00000023631, 3.07427204313, 215.74677599280),
    (0.00000020813, 3.51084686918, 330.61896365820),
    (0.00000019509, 2.81857577372, 127.47179660680),
    (0.00000017103, 3.89784279922, 214.26230328450),
    (0.00000017635, 6.19715516746, 703.63318461740),
    (0.00000017824, 2.28524493886, 388.46515523820),
    (0.00000020935, 0.14356167048, 430.53034413910),
    (0.00000016551, 1.66649120724, 38.13303563780),
    (0.00000019100, 2.97699096081, 137.03302416240),
    (0.00000015517, 4.54798410406, 956.28915597060),
    (0.00000017065, 0.16611115812, 212.33588759150),
    (0.00000014169, 0.48937283445, 213.34727954780),
    (0.00000019027, 6.27326062836, 423.41679713830),
    (0.00000013344, 2.37136126257, 429.77958461370),
    (0.00000012565, 1.03178071173, 563.63121503840),
    (0.00000014173, 3.57477564831, 213.25091132820),
    (0.00000011374, 1.45300927024, 1368.66025284500),
    (0.00000010585, 6.17633425930, 200.76892246580),
    (0.00000010600, 3.84358958373, 138.51749687070),
    (0.00000010263, 2.17423692422, 76.26607127560),
    (0.00000010072, 1.33197220789, 565.11568774670),
    (0.00000012058, 0.44149242700, 222.86032299360),
    (0.00000010367, 1.85278552549, 350.33211960040),
    (0.00000008706, 2.58144528603, 1155.36115740700),
    (0.00000008470, 1.97890349826, 625.67019231240),
    (0.00000008518, 4.51649648578, 3.18139373770),
    (0.00000007439, 4.92597321442, 212.77783057620),
    (0.00000007409, 2.03506679104, 288.08069400530),
    (0.00000008137, 3.98500592467, 85.82729883120),
    (0.00000007985, 2.20794292064, 362.86229257260),
    (0.00000006610, 6.14944028835, 417.03696332040),
    (0.00000007753, 6.23664549070, 1478.86657406440),
    (0.00000006318, 1.87388481013, 654.12438031560),
    (0.00000006319, 1.17328438271, 1265.56747862640),
    (0.00000005841, 2.35829915285, 750.10360753340),
    (0.00000005808, 5.01602242794, 479.28838891550),
    (0.00000008079, 0.42574715104, 554.06998748280),
    (0.00000006014, 5.58952234348, 425.11371816770),
    (0.00000007444, 5.41859596459, 213.82036029980),
    (0.00000007567, 2.68446523795, 191.20769491020),
    (0.00000007421, 4.19354269508, 9.56122755560),
    (0.00000005466, 3.21737829505, 234.63973644040),
    (0.00000005661, 1.46982713550, 265.98929347750),
    (0.00000005851, 4.81776629912, 1.48447270830),
    (0.00000005341, 3.45755372717, 203.73786788240),
    (0.00000004960, 1.04628615559, 12.53017297220),
    (0.00000004920, 3.85622235967, 173.94221952280),
    (0.00000004883, 1.94823282939, 195.13984817330),
    (0.00000005621, 0.81869581274, 52.69019803950),
    (0.00000005200, 3.32827437636, 515.46387109300),
    (0.00000004927, 3.81806549732, 225.82926841020),
    (0.00000005033, 0.10756875163, 252.65597135320),
    (0.00000004416, 5.45506938037, 408.43894361130),
    (0.00000004169, 1.21145214135, 1685.05212250160),
    (0.00000004066, 6.24213578122, 1279.79457262800),
    (0.00000003972, 6.13850317719, 217.49188113200),
    (0.00000005398, 5.67212179194, 1375.77379984580),
    (0.00000003916, 5.96105725915, 210.37833413120),
    (0.00000004017, 0.99840226682, 842.15068148810),
    (0.00000003899, 4.58983662507, 1272.68102562720),
    (0.00000003764, 3.30663337976, 212.54833591260),
    (0.00000004345, 3.18562241830, 414.06801790380),
    (0.00000003565, 4.75262007127, 207.88246946660),
    (0.00000003542, 2.30814954338, 1471.75302706360),
    (0.00000003732, 1.61040235688, 635.96513305090),
    (0.00000003709, 2.97082943086, 223.59403617650),
    (0.00000003576, 3.83436862558, 483.22054217860),
    (0.00000004053, 3.72105017218, 942.06206196900),
    (0.00000003756, 0.74987556308, 214.04985496340),
    (0.00000003162, 3.64550741000, 207.67002114550),
    (0.00000003149, 2.27647454229, 728.76296653100),
    (0.00000003971, 4.37874143597, 216.21985674480),
    (0.00000003541, 5.62281936827, 218.71572140940),
    (0.00000002965, 3.40117024932, 650.94298657790),
    (0.00000003949, 4.19728912450, 209.10630974400),
    (0.00000002853, 4.81077453523, 231.45834270270),
    (0.00000002826, 0.86682282341, 217.96496188400),
    (0.00000002970, 5.75162134301, 160.60889739850),
    (0.00000002724, 0.47941267764, 497.44763618020),
    (0.00000002787, 4.03144791896, 62.25142559510),
    (0.00000002605, 5.04152791794, 65.22037101170),
    (0.00000002652, 0.30602610654, 424.15051032120),
    (0.00000002543, 2.76499056123, 543.91805909620),
    (0.00000002485, 5.78396049817, 99.16062095550),
    (0.00000003209, 0.42853440759, 218.92816973050),
    (0.00000002509, 2.94704589100, 70.84944530420),
    (0.00000002308, 0.63861650866, 251.43213107580),
    (0.00000002869, 4.31959346745, 767.36908292080),
    (0.00000002232, 0.56929937568, 1073.60902419080),
    (0.00000002245, 1.69945964547, 488.84961647110),
    (0.00000002283, 1.55589787463, 601.76425067620),
    (0.00000002384, 4.44583493310, 21.34064100240),
    (0.00000002096, 5.77425542767, 88.86568021700),
    (0.00000002363, 3.35786310868, 124.43341522100),
    (0.00000002162, 6.24029269257, 1795.25844372100),
    (0.00000002452, 3.19804814047, 208.63322899200),
    (0.00000002033, 4.87029603776, 327.43756992050),
    (0.00000001950, 5.56004000293, 18.15924726470),
    (0.00000002283, 4.22375355881, 22.09140052780),
    (0.00000002217, 4.61433094630, 302.16477565500),
    (0.00000001888, 5.45600788064, 142.44965013380),
    (0.00000002075, 3.55622165076, 1169.58825140860),
    (0.00000002069, 2.75786819366, 491.81856188770),
    (0.00000001810, 5.96568495526, 213.18722085340),
    (0.00000001813, 1.39785500313, 211.81462272970),
    (0.00000001843, 1.15001484281, 203.00415469950),
    (0.00000001854, 1.41350087782, 1581.95934828300),
    (0.00000001697, 3.23613719814, 427.56139872250),
    (0.00000001736, 5.45933992115, 916.93228005540),
    (0.00000001714, 6.14729146384, 643.82943957710),
    (0.00000001948, 5.70817363392, 425.63498302950),
    (0.00000001770, 3.36194411768, 248.72381809010),
    (0.00000001611, 0.97888081762, 2001.44399215820),
    (0.00000001971, 2.59654430358, 429.04587143080),
    (0.00000001628, 0.74011617198, 177.87437278590),
    (0.00000001564, 2.04342011485, 1788.14489672020),
    (0.00000001574, 6.01995224314, 426.64637498580),
    (0.00000001939, 5.48134669380, 636.71589257630),
    (0.00000001651, 4.61629429952, 621.73803904930),
    (0.00000001552, 2.55542734908, 692.58748435350),
    (0.00000001484, 6.17173980637, 56.62235130260),
    (0.00000001782, 3.26122906302, 175.16605980020),
    (0.00000001503, 2.59953333916, 228.27694896500),
    (0.00000001559, 0.36281050773, 776.93031047640),
    (0.00000001799, 3.46395976970, 1258.45393162560),
    (0.00000001521, 3.75588462293, 213.51154375910),
    (0.00000001810, 4.37552745264, 213.41097002260),
    (0.00000001521, 0.30214462385, 213.08664711690),
    (0.00000001608, 4.66724132818, 269.92144674060),
    (0.00000001525, 1.47939329423, 198.32124191100),
    (0.00000001408, 1.38491846750, 501.37978944330),
    (0.00000001327, 0.23760037979, 148.07872442630),
    (0.00000001305, 2.41201772023, 275.55052103310),
    (0.00000001578, 2.82443242444, 426.55000676620),
    (0.00000001203, 1.36928065935, 235.39049596580),
    (0.00000001296, 5.75203277385, 1692.16566950240),
    (0.00000001295, 3.04090959062, 831.85574074960),
    (0.00000001283, 1.62400181159, 643.07868005170),
    (0.00000001617, 1.31181209458, 214.78356814630),
    (0.00000001346, 4.01262069353, 278.51946644970),
    (0.00000001166, 0.09590019561, 340.77089204480),
    (0.00000001115, 2.20460481017, 221.37585028530),
    (0.00000001176, 1.07528227869, 312.19908396260),
    (0.00000001107, 1.50329021421, 289.56516671360),
    (0.00000001143, 4.40125874383, 213.55972786890),
    (0.00000001253, 0.21632769953, 404.50679034820),
    (0.00000001074, 3.17412275025, 98.89998852460),
    (0.00000001103, 0.23626839162, 617.80588578620),
    (0.00000001077, 3.51670933532, 312.45971639350),
    (0.00000001039, 0.53953974796, 778.41478318470),
    (0.00000001195, 2.11232088496, 205.22234059070),
    (0.00000001093, 5.16243153571, 630.33605875840),
    (0.00000001143, 5.93977485365, 213.03846300710),
    (0.00000001040, 4.79631324365, 106.27416795630),
    (0.00000001100, 0.02509241739, 219.44943459230),
    (0.00000001311, 5.93900415785, 436.15941843160),
    (0.00000001260, 0.72481995446, 355.74874557180),
    (0.00000000950, 2.00801292252, 1045.15483618760),
    (0.00000001186, 1.84906064486, 151.04766984290),
    (0.00000000974, 3.01092368346, 696.51963761660),
    (0.00000000924, 4.88158186437, 39.35687591520),
    (0.00000000961, 2.80113869315, 738.79727483860),
    (0.00000001011, 6.27004359435, 121.25202148330),
    (0.00000000904, 4.15218356485, 426.07692601420),
    (0.00000000904, 4.24232505252, 10.29494073850),
    (0.00000000895, 2.47587956888, 447.93883187840),
    (0.00000001186, 0.85270715988, 525.49817940060),
    (0.00000000824, 3.97540449663, 210.59078245230),
    (0.00000000831, 4.05299295705, 207.14875628370),
    (0.00000000937, 5.44353432307, 344.70304530790),
    (0.00000000823, 2.08766677969, 358.93013930950),
    (0.00000000971, 5.09512804595, 1589.07289528380),
    (0.00000001037, 1.04152859909, 2.44768055480),
    (0.00000000816, 0.62175655307, 188.92007304980),
    (0.00000000798, 3.36396062989, 237.67811782620),
    (0.00000000755, 5.90983584858, 284.14854074220),
    (0.00000000870, 1.62765846893, 114.13847448250),
    (0.00000000734, 6.23523714922, 2111.65031337760),
    (0.00000000767, 2.73651219269, 627.36711334180),
    (0.00000000701, 0.72526525525, 10213.28554621100),
    (0.00000000801, 5.84130533519, 905.88657979150),
    (0.00000000710, 1.78740818763, 2104.53676637680),
    (0.00000000670, 0.75839374890, 2317.83586181480),
    (0.00000000720, 4.95645178898, 638.41281360570),
    (0.00000000796, 4.87623914638, 342.25536475310),
    (0.00000000703, 0.35096991676, 220.46082654860),
    (0.00000000835, 3.19492825640, 1574.84580128220),
    (0.00000000824, 0.08813665925, 216.00740842370),
    (0.00000000653, 4.19599635390, 247.23934538180),
    (0.00000000826, 4.66845240923, 427.11945573780),
    (0.00000000690, 0.41873449575, 5856.47765911540),
    (0.00000000690, 1.34023204821, 6283.07584999140),
    (0.00000000690, 0.58291546593, 213.45915413240),
    (0.00000000639, 1.20304559619, 867.42347575360),
    (0.00000000830, 1.57233214789, 1898.35121793960),
    (0.00000000753, 1.51187970880, 576.16138801060),
    (0.00000000629, 2.83598833891, 420.96911658350),
    (0.00000000690, 3.48062808501, 213.13903674360),
    (0.00000000600, 5.22938546212, 212.02707105080),
    (0.00000000565, 5.28099337758, 423.67742956920),
    (0.00000000552, 5.83265103738, 84.34282612290),
    (0.00000000546, 3.56588711151, 1485.98012106520),
    (0.00000000642, 6.15007145598, 179.35884549420),
    (0.00000000697, 1.91977327925, 134.58534360760),
    (0.00000000648, 5.15917450752, 8.07675484730),
    (0.00000000551, 3.33109164145, 980.66817835880),
    (0.00000000511, 3.87073988213, 125.98732389850),
    (0.00000000506, 0.80261216855, 181.05576652360),
    (0.00000000564, 4.05871107615, 831.10498122420),
    (0.00000000681, 3.45804290093, 220.36445832900),
    (0.00000000541, 2.39252901431, 421.93232443000),
    (0.00000000498, 3.11515053568, 439.12836384820),
    (0.00000000517, 2.75430004800, 1148.24761040620),
    (0.00000000491, 4.47199498503, 558.00214074590),
    (0.00000000467, 4.18144797677, 444.75743814070),
    (0.00000000458, 0.60848440253, 206.23373254700),
    (0.00000000542, 3.28613020157, 245.54242435240),
    (0.00000000477, 5.48556902348, 35.42472265210),
    (0.00000000474, 2.42545073874, 436.89313161450),
    (0.00000000481, 3.72498040536, 206.13736432740),
    (0.00000000435, 1.61732308614, 191.95845443560),
    (0.00000000488, 0.26059969650, 416.30325013750),
    (0.00000000493, 4.13699180247, 518.64526483070),
    (0.00000000595, 5.11706007934, 214.57111982520),
    (0.00000000486, 5.17710069856, 67.66805156650),
    (0.00000000463, 5.53192185211, 418.52143602870),
    (0.00000000421, 5.57377685121, 430.79097657000),
    (0.00000000446, 6.20735049659, 73.29712585900),
    (0.00000000421, 4.65837340438, 543.02428721890),
    (0.00000000435, 2.95256554350, 5.41662597140),
    (0.00000000416, 4.36391909218, 113.38771495710),
    (0.00000000495, 5.38121485133, 391.17346822390),
    (0.00000000520, 3.99939347071, 618.55664531160),
    (0.00000000429, 3.26903461513, 144.14657116320),
    (0.00000000435, 1.60816661416, 2214.74308759620),
    (0.00000000398, 2.38329818919, 299.12639426920),
    (0.00000000399, 0.06301179341, 206.70681329900),
    (0.00000000394, 2.75496219113, 425.84743135060),
    (0.00000000508, 2.86873328929, 337.73251065900),
    (0.00000000475, 5.68530292289, 320.32402291970),
    (0.00000000432, 0.68132398291, 116.42609634290),
    (0.00000000404, 1.84249441289, 9786.68735533500),
    (0.00000000371, 5.83382962844, 2008.55753915900),
    (0.00000000382, 4.24995364794, 387.24131496080),
    (0.00000000416, 3.81986946256, 429.51895218280),
    (0.00000000491, 4.18623117082, 219.89137757700),
    (0.00000000352, 1.65610545221, 963.40270297140),
    (0.00000000353, 5.50209003460, 305.34616939270),
    (0.00000000431, 4.39380503963, 353.30106501700),
    (0.00000000375, 2.67828133567, 319.57326339430),
    (0.00000000359, 3.54801032661, 421.18156490460),
    (0.00000000339, 5.19074405462, 69.15252427480),
    (0.00000000358, 1.11857595997, 1044.40407666220),
    (0.00000000334, 1.84260994740, 1361.54670584420),
    (0.00000000328, 6.07106596408, 710.74673161820),
    (0.00000000328, 1.48618893585, 2420.92863603340),
    (0.00000000359, 5.62797136991, 78.71375183040),
    (0.00000000405, 2.91366762549, 1891.23767093880),
    (0.00000000398, 2.08900381937, 4.66586644600),
    (0.00000000326, 1.62373774313, 5.62907429250),
    (0.00000000405, 1.87470341223, 114.39910691340),
    (0.00000000393, 0.56487847337, 128.95626931510),
    (0.00000000312, 5.29291124448, 347.88443904560),
    (0.00000000310, 0.31232452686, 427.34895040140),
    (0.00000000308, 2.84912656825, 487.36514376280),
    (0.00000000291, 3.25977762780, 494.26624244250),
    (0.00000000303, 4.93962873690, 373.90799283650),
    (0.00000000289, 2.83591185309, 212.07525516060),
    (0.00000000289, 2.05371431350, 214.52293571540),
    (0.00000000398, 6.03822674845, 432.22726516850),
    (0.00000000288, 6.16001418475, 969.62247809490),
    (0.00000000296, 0.30332524090, 1055.44977692610),
    (0.00000000280, 1.29728455136, 241.61027108930),
    (0.00000000280, 5.41630221077, 1493.09366806600),
    (0.00000000315, 6.24003908326, 465.95506679120),
    (0.00000000274, 5.03981944861, 458.84151979040),
    (0.00000000296, 3.04457317761, 211.60217440860),
    (0.00000000274, 2.72607352851, 145.63104387150),
    (0.00000000293, 1.32452002382, 159.12442469020),
    (0.00000000263, 6.11559198968, 2428.04218303420),
    (0.00000000323, 1.17502395659, 815.06334611420),
    (0.00000000345, 5.37083374878, 428.08266358430),
    (0.00000000258, 0.43205106363, 2634.22773147140),
    (0.00000000275, 0.91628212149, 849.26422848890),
    (0.00000000340, 1.29378813067, 329.72519178090),
    (0.00000000294, 4.29399534634, 4.19278569400),
    (0.00000000339, 1.03883773894, 32.24332891440),
    (0.00000000244, 3.52504227332, 184.98791978670),
    (0.00000000243, 3.13047989401, 525.75881183150),
    (0.00000000260, 5.99216785208, 20.60692781950),
    (0.00000000303, 3.96772261614, 934.94851496820),
    (0.00000000285, 5.69474711283, 220.93390730060),
    (0.00000000239, 2.09516779457, 292.01284726840),
    (0.00000000242, 0.98744748894, 282.45161971280),
    (0.00000000278, 2.81667003542, 87.31177153950),
    (0.00000000285, 4.76303256917, 54.17467074780),
    (0.00000000236, 5.79560286324, 280.96714700450),
    (0.00000000246, 1.83689902078, 214.99601646740),
    (0.00000000221, 0.48302467341, 153.49535039770),
    (0.00000000238, 3.52738705554, 267.47376618580),
    (0.00000000293, 5.91401607974, 14.97785352700),
    (0.00000000235, 0.29884419224, 14.01464568050),
    (0.00000000229, 3.91975580405, 182.27960680100),
    (0.00000000217, 3.96328561940, 894.84087952760),
    (0.00000000218, 1.46057992688, 2531.13495725280),
    (0.00000000210, 2.01138855049, 211.86280683950),
    (0.00000000210, 2.87823761610, 214.73538403650),
    (0.00000000223, 2.49651288358, 1464.63948006280),
    (0.00000000217, 4.03234048538, 835.03713448730),
    (0.00000000209, 2.97542058241, 273.10284047830),
    (0.00000000210, 2.56849303008, 593.42686339800),
    (0.00000000218, 1.71859101510, 0.96320784650),
    (0.00000000232, 1.86083014117, 221.16340196420),
    (0.00000000199, 3.53454927143, 219.66188291340),
    (0.00000000197, 2.65338829617, 864.24208201590),
    (0.00000000219, 3.46267185338, 1182.92157353290),
    (0.00000000199, 2.56046317223, 264.50482076920),
    (0.00000000199, 2.03508708900, 757.21715453420),
    (0.00000000237, 5.05443109284, 254.94359321360),
    (0.00000000191, 2.07106909876, 756.32338265690),
    (0.00000000192, 1.67985944172, 1677.93857550080),
    (0.00000000191, 1.05067348453, 702.14871190910),
    (0.00000000181, 1.89151852263, 6.15033915430),
    (0.00000000205, 1.98151360584, 199.28444975750),
    (0.00000000181, 1.25381796494, 2737.32050569000),
    (0.00000000186, 2.81416016738, 569.04784100980),
    (0.00000000215, 4.52373060846, 3060.82592234740),
    (0.00000000222, 2.90133577623, 205.43478891180),
    (0.00000000246, 3.55891849574, 1251.34038462480),
    (0.00000000191, 4.20221553993, 556.51766803760),
    (0.00000000217, 2.64509967170, 2207.62954059540),
    (0.00000000225, 0.14271906959, 131.40394986990),
    (0.00000000189, 1.27260556263, 192.69216761850),
    (0.00000000179, 6.15189171649, 2.92076130680),
    (0.00000000178, 2.01622328964, 705.11765732570),
    (0.00000000181, 3.62483757675, 233.90602325750),
    (0.00000000188, 2.92836809840, 227.31374111850),
    (0.00000000164, 3.50682537694, 1382.88734684660),
    (0.00000000166, 5.85452227121, 637.44960575920),
    (0.00000000160, 0.13309484488, 431.26405732200),
    (0.00000000158, 5.92242110049, 96.87299909510),
    (0.00000000178, 4.55557913565, 46.47042291600),
    (0.00000000157, 1.35908014451, 51.20572533120),
    (0.00000000155, 6.24092514222, 464.73122651380),
    (0.00000000155, 6.02684189458, 1286.90811962880),
    (0.00000000155, 1.36669731999, 206.93630796260),
    (0.00000000175, 4.95121713507, 1905.46476494040),
    (0.00000000153, 6.06094547271, 561.18353448360),
    (0.00000000208, 4.50537355579, 24.37902238820),
    (0.00000000185, 5.49802440713, 205.66428357540),
    (0.00000000160, 4.18196878816, 3340.61242669980),
    (0.00000000160, 2.85370771355, 209.15449385380),
    (0.00000000161, 4.98020340619, 2648.45482547300),
    (0.00000000152, 0.85558875667, 570.74476203920),
    (0.00000000156, 2.03601440129, 217.44369702220),
    (0.00000000192, 3.98017256784, 212.40532356070),
    (0.00000000192, 0.90945359875, 214.19286731530),
    (0.00000000198, 3.54289000289, 533.62311835770),
    (0.00000000160, 2.51522796187, 3127.31333126180),
    (0.00000000145, 0.93414637377, 1994.33044515740),
    (0.00000000141, 5.66801998888, 120.35824960600),
    (0.00000000141, 3.88995778619, 454.90936652730),
    (0.00000000152, 1.01453902153, 2840.41327990860),
    (0.00000000172, 4.15145223592, 2.96894541660),
    (0.00000000146, 5.26789260159, 7.06536289100),
    (0.00000000177, 0.43196690516, 140.00196957900),
    (0.00000000144, 3.95680110579, 300.61086697750),
    (0.00000000152, 4.29475572258, 555.55446019110),
    (0.00000000143, 4.15264164139, 31.01948863700),
    (0.00000000138, 4.20096561019, 731.94436026870),
    (0.00000000139, 0.79924371385, 166.82867252200),
    (0.00000000135, 1.27192121638, 92.94084583200),
    (0.00000000165, 1.94881873062, 107.02492748170),
    (0.00000000153, 3.07590434707, 3480.31056622260),
    (0.00000000125, 3.41796878361, 1802.37199072180),
    (0.00000000128, 5.83700968658, 2324.94940881560),
    (0.00000000129, 2.75851443754, 480.77286162380),
    (0.00000000122, 4.75728514255, 2854.64037391020),
    (0.00000000129, 4.67730374872, 913.96333463880),
    (0.00000000121, 1.19957548726, 572.22923474750),
    (0.00000000146, 3.71232877850, 546.95644048200),
    (0.00000000120, 4.59083886034, 339.28641933650),
    (0.00000000127, 6.19372294369, 59.80374504030),
    (0.00000000123, 5.98484393970, 477.80391620720),
    (0.00000000122, 5.82973501131, 990.22940591440),
    (0.00000000151, 2.39413061881, 2524.02141025200),
    (0.00000000147, 4.98199291770, 850.01498801430),
    (0.00000000127, 0.47350572907, 6.59228213900),
    (0.00000000116, 4.71488890981, 1130.23137549340),
    (0.00000000129, 5.42665311725, 2538.24850425360),
    (0.00000000111, 4.51520219898, 1699.27921650320),
    (0.00000000114, 2.06120434865, 952.09637027660),
    (0.00000000112, 4.14736642579, 422.40540518200),
    (0.00000000111, 5.53230411085, 857.12853501510),
    (0.00000000109, 3.00005651288, 420.44785172170),
    (0.00000000112, 2.20667724213, 395.57870223900),
    (0.00000000147, 1.52324472511, 552.58551477450),
    (0.00000000118, 5.47495367121, 2957.73314812880),
    (0.00000000113, 2.57036693965, 462.02291352810),
    (0.00000000122, 4.96246567897, 638.93407846750),
    (0.00000000104, 1.91139383428, 472.17484191470),
    (0.00000000116, 2.82742160564, 450.97721326420),
    (0.00000000115, 2.26043201622, 1781.03134971940),
    (0.00000000110, 4.86686492403, 2914.01423582380),
    (0.00000000109, 4.43848727280, 405.99126305650),
    (0.00000000102, 5.90112611078, 99.91138048090),
    (0.00000000101, 2.53392410330, 640.86049416050),
    (0.00000000112, 5.53802838779, 381.35160823740),
    (0.00000000099, 5.92199927896, 411.62033734900),
    (0.00000000100, 5.21941099517, 426.48631629140),
    (0.00000000137, 2.20269111622, 7.16173111060),
    (0.00000000097, 1.27914551364, 2847.52682690940),
    (0.00000000115, 5.22953781515, 1119.18567522950),
    (0.00000000095, 4.26135357007, 540.73666535850),
    (0.00000000098, 5.27107833435, 639.94547042380),
    (0.00000000107, 4.38879925113, 412.58354519550),
    (0.00000000093, 5.35954173624, 334.55111692130),
    (0.00000000094, 1.16749092536, 5643.17856367740),
    (0.00000000106, 4.19443004843, 486.40193591630),
    (0.00000000096, 0.59816870672, 714.67888488130),
    (0.00000000094, 0.54205024076, 423.62924545940),
    (0.00000000109, 2.82817225044, 468.24268865160),
    (0.00000000083, 6.12100285205, 380.12776796000),
    (0.00000000084, 2.20217125255, 909.81873305460),
    (0.00000000085, 5.20920130934, 562.14674233010),
    (0.00000000105, 2.66415710279, 460.53844081980),
    (0.00000000084, 0.14646013561, 681.54178408960),
    (0.00000000080, 3.03551986945, 409.92341631960),
    (0.00000000097, 5.09373549436, 92.04707395470),
    (0.00000000110, 2.03622569317, 642.34496686880),
    (0.00000000080, 5.71035549752, 361.37781986430),
    (0.00000000084, 3.00961145133, 426.81063919710),
    (0.00000000085, 4.28770375688, 135.54855145410),
    (0.00000000093, 5.32943472274, 432.01481684740),
    (0.00000000086, 1.51247258028, 760.25553592000),
    (0.00000000084, 5.83905303748, 426.38574255490),
    (0.00000000100, 3.62925349363, 426.71006546060),
    (0.00000000094, 4.30151510535, 3377.21779200400),
    (0.00000000098, 2.07334671974, 639.84910220420),
    (0.00000000080, 4.11576173565, 774.48262992160),
    (0.00000000075, 2.89122656610, 806.72595883600),
    (0.00000000080, 0.88468467902, 856.37777548970),
    (0.00000000072, 4.85259171933, 392.65794093220),
    (0.00000000083, 0.11133738383, 402.21916848780),
)

B1 = (
    (0.00397554998, 5.33289992556, 213.29909543800),
    (0.00049478641, 3.14159265359, 0.00000000000),
    (0.00018571607, 6.09919206378, 426.59819087600),
    (0.00014800587, 2.30586060520, 206.18554843720),
    (0.00009643981, 1.69674660120, 220.41264243880),
    (0.00003757161, 1.25429514018, 419.48464387520),
    (0.00002716647, 5.91166664787, 639.89728631400),
    (0.00001455309, 0.85161616532, 433.71173787680),
    (0.00001290595, 2.91770857090, 7.11354700080),
    (0.00000852630, 0.43572078997, 316.39186965660),
    (0.00000284386, 1.61881754773, 227.52618943960),
    (0.00000292185, 5.31574251270, 853.19638175200),
    (0.00000275090, 3.88864137336, 103.09277421860),
    (0.00000297726, 0.91909206723, 632.78373931320),
    (0.00000172359, 0.05215146556, 647.01083331480),
    (0.00000127731, 1.20711452525, 529.69096509460),
    (0.00000166237, 2.44351613165, 199.07200143640),
    (0.00000158220, 5.20850125766, 110.20632121940),
    (0.00000109839, 2.45695551627, 217.23124870110),
    (0.00000081759, 2.75839171353, 210.11770170030),
    (0.00000081010, 2.86038377187, 14.22709400160),
    (0.00000068658, 1.65537623146, 202.25339517410),
    (0.00000059281, 1.82410768234, 323.50541665740),
    (0.00000065161, 1.25527521313, 216.48048917570),
    (0.00000061024, 1.25273412095, 209.36694217490),
    (0.00000046386, 0.81534705304, 440.82528487760),
    (0.00000036163, 1.81851057689, 224.34479570190),
    (0.00000034041, 2.83971297997, 117.31986822020),
    (0.00000032164, 1.18676132343, 846.08283475120),
    (0.00000033114, 1.30557080010, 412.37109687440),
    (0.00000027282, 4.64744847591, 1066.49547719000),
    (0.00000022805, 4.12923703368, 415.55249061210),
    (0.00000027128, 4.44228739187, 11.04570026390),
    (0.00000018100, 5.56392353608, 860.30992875280),
    (0.00000020851, 1.40999273740, 309.27832265580),
    (0.00000014947, 1.34302610607, 95.97922721780),
    (0.00000015316, 1.22393617996, 63.73589830340),
    (0.00000014601, 1.00753704970, 536.80451209540),
    (0.00000012842, 2.27059911053, 742.99006053260),
    (0.00000012832, 4.88898877901, 522.57741809380),
    (0.00000013137, 2.45991904379, 490.33408917940),
    (0.00000011883, 1.87308666696, 423.41679713830),
    (0.00000013027, 3.21731634178, 277.03499374140),
    (0.00000009946, 3.11650057543, 625.67019231240),
    (0.00000012710, 0.29501589197, 422.66603761290),
    (0.00000009644, 1.74586356703, 330.61896365820),
    (0.00000008079, 2.41931187953, 430.53034413910),
    (0.00000008245, 4.68121931659, 215.74677599280),
    (0.00000008958, 0.46482448501, 429.77958461370),
    (0.00000006547, 3.01351967549, 949.17560896980),
    (0.00000007251, 5.97098186912, 149.56319713460),
    (0.00000006056, 1.49115011100, 234.63973644040),
    (0.00000005791, 5.36720639912, 735.87651353180),
    (0.00000005994, 0.02442871989, 654.12438031560),
    (0.00000006647, 3.90879134581, 351.81659230870),
    (0.00000006824, 1.52456408861, 437.64389113990),
    (0.00000005134, 3.81149834833, 74.78159856730),
    (0.00000003959, 5.63505813057, 210.85141488320),
    (0.00000003811, 2.63992803111, 3.18139373770),
    (0.00000003643, 1.73267151007, 1059.38193018920),
    (0.00000003554, 4.98621474362, 3.93215326310),
    (0.00000004568, 4.33599514584, 628.85158605010),
    (0.00000003145, 2.51404811765, 1162.47470440780),
    (0.00000003522, 1.16093567319, 223.59403617650),
    (0.00000002933, 2.06057834252, 956.28915597060),
    (0.00000002644, 5.62559379305, 203.73786788240),
    (0.00000002992, 5.06312015437, 515.46387109300),
    (0.00000002304, 2.73123930535, 21.34064100240),
    (0.00000002168, 2.91805928238, 203.00415469950),
    (0.00000002398, 3.99421633537, 1279.79457262800),
    (0.00000002146, 0.87500689888, 408.43894361130),
    (0.00000002074, 1.65731069687, 137.03302416240),
    (0.00000001797, 1.56879308343, 124.43341522100),
    (0.00000002088, 1.85721384366, 138.51749687070),
    (0.00000001769, 4.82294294946, 1073.60902419080),
    (0.00000001635, 1.20387813348, 88.86568021700),
    (0.00000002202, 5.93027042684, 1052.26838318840),
    (0.00000001843, 0.22126910774, 750.10360753340),
    (0.00000001851, 2.45470409290, 340.77089204480),
    (0.00000001890, 0.41025631859, 127.47179660680),
    (0.00000001582, 5.63360832372, 214.26230328450),
    (0.00000001920, 3.77935901504, 350.33211960040),
    (0.00000001786, 5.78644477326, 635.96513305090),
    (0.00000001497, 3.13026893210, 703.63318461740),
    (0.00000001583, 3.46882532865, 38.13303563780),
    (0.00000001577, 4.02973226017, 388.46515523820),
    (0.00000001645, 5.59115773632, 483.22054217860),
    (0.00000001405, 4.07880624509, 728.76296653100),
    (0.00000001498, 5.87094430469, 362.86229257260),
    (0.00000001317, 2.22386203585, 213.34727954780),
    (0.00000001321, 2.91534782718, 1265.56747862640),
    (0.00000001307, 5.41748323885, 217.96496188400),
    (0.00000001483, 0.91111666841, 543.91805909620),
    (0.00000001291, 2.62333801070, 554.06998748280),
    (0.00000001406, 0.34582712649, 85.82729883120),
    (0.00000001287, 2.82247279651, 231.45834270270),
    (0.00000001563, 4.88438049382, 208.63322899200),
    (0.00000001316, 5.30963570131, 213.25091132820),
    (0.00000001164, 1.39531381032, 210.37833413120),
    (0.00000001295, 2.46089213219, 200.76892246580),
    (0.00000001236, 3.03659580871, 838.96928775040),
    (0.00000001449, 4.00934078371, 195.13984817330),
    (0.00000001251, 1.46674521697, 218.71572140940),
    (0.00000001568, 1.89939852487, 212.33588759150),
    (0.00000001067, 5.34734443894, 207.67002114550),
    (0.00000001111, 0.70962013461, 447.93883187840),
    (0.00000001012, 1.37217220640, 636.71589257630),
    (0.00000001163, 6.00108996618, 191.20769491020),
    (0.00000000887, 2.84483069917, 191.95845443560),
    (0.00000001005, 2.72373040634, 1478.86657406440),
    (0.00000000879, 1.19585734916, 417.03696332040),
    (0.00000000829, 4.94182950387, 497.44763618020),
    (0.00000000878, 6.24981924813, 265.98929347750),
    (0.00000000781, 4.61973017912, 424.15051032120),
    (0.00000000924, 3.64210508536, 222.86032299360),
    (0.00000000971, 2.89404568581, 563.63121503840),
    (0.00000000946, 5.72987725592, 1368.66025284500),
    (0.00000000834, 6.12384852532, 209.10630974400),
    (0.00000000911, 1.06795057723, 650.94298657790),
    (0.00000000731, 0.81660632103, 142.44965013380),
    (0.00000000795, 5.54574074566, 76.26607127560),
    (0.00000001012, 5.97140626297, 643.07868005170),
    (0.00000000703, 2.41479303782, 10.29494073850),
    (0.00000000726, 4.52598413209, 565.11568774670),
    (0.00000000691, 2.31682364985, 160.60889739850),
    (0.00000000695, 0.37889317398, 212.77783057620),
    (0.00000000676, 4.43606270900, 842.15068148810),
    (0.00000000769, 4.47368582271, 52.69019803950),
    (0.00000000658, 0.32331118921, 621.73803904930),
    (0.00000000838, 4.68035046143, 288.08069400530),
    (0.00000000674, 5.63961963995, 867.42347575360),
    (0.00000000695, 1.32062509205, 1169.58825140860),
    (0.00000000841, 2.46995220838, 1375.77379984580),
    (0.00000000633, 3.46145143241, 18.15924726470),
    (0.00000000722, 0.04119071457, 269.92144674060),
    (0.00000000757, 2.15030650611, 207.88246946660),
    (0.00000000692, 0.87072324976, 213.82036029980),
    (0.00000000602, 0.85288769518, 225.82926841020),
    (0.00000000635, 4.76109030475, 831.85574074960),
    (0.00000000701, 1.20410854661, 479.28838891550),
    (0.00000000624, 2.30585779534, 643.82943957710),
    (0.00000000582, 0.18811617696, 1.48447270830),
    (0.00000000513, 2.56525967840, 404.50679034820),
    (0.00000000502, 4.97423814367, 212.54833591260),
    (0.00000000644, 2.10955154583, 1272.68102562720),
    (0.00000000467, 4.47217820662, 235.39049596580),
    (0.00000000566, 4.44740324446, 429.04587143080),
    (0.00000000448, 0.57491120802, 22.09140052780),
    (0.00000000520, 1.15131866397, 337.73251065900),
    (0.00000000476, 4.78513362967, 218.92816973050),
    (0.00000000519, 0.61616177345, 436.89313161450),
    (0.00000000442, 2.10204008144, 416.30325013750),
    (0.00000000536, 1.08779067908, 344.70304530790),
    (0.00000000477, 2.42483193385, 216.21985674480),
    (0.00000000469, 5.22622034028, 942.06206196900),
    (0.00000000392, 0.41137926465, 302.16477565500),
    (0.00000000400, 5.17216478470, 414.06801790380),
    (0.00000000383, 3.58419227076, 1045.15483618760),
    (0.00000000443, 1.11051326413, 425.11371816770),
    (0.00000000517, 3.44547026103, 12.53017297220),
    (0.00000000369, 1.60095273908, 56.62235130260),
    (0.00000000354, 2.79123486392, 1581.95934828300),
    (0.00000000405, 5.93402105921, 173.94221952280),
    (0.00000000319, 4.31850876624, 219.44943459230),
    (0.00000000330, 0.62529198264, 358.93013930950),
    (0.00000000305, 0.82404423420, 1485.98012106520),
    (0.00000000391, 2.59385552893, 1795.25844372100),
    (0.00000000291, 3.12019266878, 217.49188113200),
    (0.00000000294, 2.18552193901, 444.75743814070),
    (0.00000000281, 0.77791302266, 757.21715453420),
    (0.00000000355, 5.44570491928, 1685.05212250160),
    (0.00000000305, 2.65927043884, 355.74874557180),
    (0.00000000269, 6.00323720265, 934.94851496820),
    (0.00000000287, 2.60486363576, 113.38771495710),
    (0.00000000348, 0.98872551635, 70.84944530420),
    (0.00000000331, 5.62133883922, 9.56122755560),
    (0.00000000255, 4.14086605030, 284.14854074220),
    (0.00000000311, 6.27145060602, 207.14875628370),
    (0.00000000267, 4.72606312146, 696.51963761660),
    (0.00000000319, 4.68828119248, 1155.36115740700),
    (0.00000000227, 3.10352674343, 1361.54670584420),
    (0.00000000228, 1.19253095837, 1589.07289528380),
    (0.00000000244, 5.36327976010, 245.54242435240),
    (0.00000000218, 2.16069250901, 177.87437278590),
    (0.00000000254, 4.51652534648, 1148.24761040620),
    (0.00000000211, 2.82699627326, 106.27416795630),
    (0.00000000230, 4.63171743406, 107.02492748170),
    (0.00000000201, 4.52152562223, 508.35032409220),
    (0.00000000230, 5.93560798508, 618.55664531160),
    (0.00000000253, 2.08074949572, 252.65597135320),
    (0.00000000234, 2.43423283339, 1692.16566950240),
    (0.00000000196, 1.01284131123, 114.39910691340),
    (0.00000000196, 2.73629728926, 214.04985496340),
    (0.00000000191, 1.51642829677, 6069.77675455340),
    (0.00000000252, 5.10097595426, 1258.45393162560),
    (0.00000000240, 2.93712394928, 916.93228005540),
    (0.00000000224, 4.42406538277, 251.43213107580),
    (0.00000000223, 2.34400676548, 1677.93857550080),
    (0.00000000228, 5.00073557208, 1574.84580128220),
    (0.00000000183, 5.09056895026, 220.46082654860),
    (0.00000000178, 6.05669760153, 206.13736432740),
    (0.00000000185, 3.73859309582, 114.13847448250),
    (0.00000000200, 1.89409546254, 2420.92863603340),
    (0.00000000158, 2.78517362162, 2008.55753915900),
    (0.00000000191, 2.28724146195, 2435.15573003500),
    (0.00000000188, 4.29343910228, 1471.75302706360),
    (0.00000000155, 5.35194123420, 576.16138801060),
    (0.00000000174, 2.80423114755, 1781.03134971940),
    (0.00000000166, 5.32531835813, 2001.44399215820),
    (0.00000000165, 2.62993712087, 525.49817940060),
    (0.00000000141, 4.73916921092, 501.37978944330),
    (0.00000000161, 5.83368523750, 181.05576652360),
    (0.00000000137, 1.45135867137, 131.54696222180),
    (0.00000000157, 3.22870773657, 1493.09366806600),
    (0.00000000136, 4.20279658293, 710.74673161820),
    (0.00000000144, 4.61003572124, 121.25202148330),
    (0.00000000131, 5.85409245557, 175.16605980020),
    (0.00000000144, 0.96056164245, 214.78356814630),
    (0.00000000146, 3.95687956474, 421.93232443000),
    (0.00000000138, 1.03080573610, 4.66586644600),
    (0.00000000167, 1.97508934614, 62.25142559510),
    (0.00000000123, 2.28640485589, 1898.35121793960),
    (0.00000000168, 4.63122081226, 1891.23767093880),
    (0.00000000129, 0.05327999225, 211.81462272970),
    (0.00000000134, 3.49720535944, 488.84961647110),
    (0.00000000117, 3.43819501459, 436.15941843160),
    (0.00000000125, 5.87007326241, 963.40270297140),
    (0.00000000120, 0.70795300239, 81.75213321620),
    (0.00000000125, 4.50999471095, 2317.83586181480),
    (0.00000000116, 6.11600926571, 558.00214074590),
    (0.00000000117, 4.78666549046, 601.76425067620),
    (0.00000000108, 0.45464469172, 1802.37199072180),
    (0.00000000111, 1.44669239244, 2531.13495725280),
    (0.00000000109, 6.14289264597, 151.04766984290),
    (0.00000000113, 4.05600865495, 1286.90811962880),
    (0.00000000129, 5.13936946160, 849.26422848890),
    (0.00000000127, 3.88189432056, 98.89998852460),
    (0.00000000133, 2.38290634070, 2111.65031337760),
    (0.00000000122, 4.40757611742, 778.41478318470),
    (0.00000000095, 0.07909774752, 213.41097002260),
    (0.00000000095, 1.66925524906, 213.18722085340),
    (0.00000000103, 1.88058957173, 99.16062095550),
    (0.00000000119, 3.62785705509, 248.72381809010),
    (0.00000000090, 4.63029999228, 228.27694896500),
    (0.00000000092, 5.48700119144, 767.36908292080),
    (0.00000000089, 4.61331934339, 431.26405732200),
    (0.00000000099, 3.60670326134, 776.93031047640),
    (0.00000000085, 4.93878023673, 2.44768055480),
    (0.00000000089, 6.24541644164, 661.23792731640),
    (0.00000000085, 0.45896349060, 1382.88734684660),
    (0.00000000088, 3.81144552178, 1788.14489672020),
    (0.00000000103, 3.20558404998, 312.19908396260),
    (0.00000000080, 2.28889729136, 213.08664711690),
    (0.00000000080, 5.74264101239, 213.51154375910),
    (0.00000000082, 3.23546757052, 198.32124191100),
    (0.00000000078, 6.03841191050, 835.03713448730),
    (0.00000000080, 0.22601918692, 427.56139872250),
    (0.00000000072, 2.05164614795, 2634.22773147140),
    (0.00000000091, 5.97938003596, 556.51766803760),
    (0.00000000087, 2.71469794199, 617.80588578620),
)

B2 = (
    (0.00020629977, 0.50482422817, 213.29909543800),
    (0.00003719555, 3.99833475829, 206.18554843720),
    (0.00001627158, 6.18189939500, 220.41264243880),
    (0.00001346067, 0.00000000000, 0.00000000000),
    (0.00000705842, 3.03914308836, 419.48464387520),
    (0.00000365042, 5.09928680706, 426.59819087600),
    (0.00000329632, 5.27899210039, 433.71173787680),
    (0.00000219335, 3.82841533795, 639.89728631400),
    (0.00000139393, 1.04272623499, 7.11354700080),
    (0.00000103980, 6.15730992966, 227.52618943960),
    (0.00000092961, 1.97994412845, 316.39186965660),
    (0.00000071242, 4.14754353431, 199.07200143640),
    (0.00000051927, 2.88364833898, 632.78373931320),
    (0.00000048961, 4.43390206741, 647.01083331480),
    (0.00000041373, 3.15927770079, 853.19638175200),
    (0.00000028602, 4.52978327558, 210.11770170030),
    (0.00000023969, 1.11595912146, 14.22709400160),
    (0.00000020511, 4.35095844197, 217.23124870110),
    (0.00000019532, 5.30779711223, 440.82528487760),
    (0.00000018263, 0.85391476786, 110.20632121940),
    (0.00000015742, 4.25767226302, 103.09277421860),
    (0.00000016840, 5.68112084135, 216.48048917570),
    (0.00000013613, 2.99904334066, 412.37109687440),
    (0.00000011567, 2.52679928410, 529.69096509460),
    (0.00000007963, 3.31512423920, 202.25339517410),
    (0.00000006599, 0.28766025146, 323.50541665740),
    (0.00000006312, 1.16121321336, 117.31986822020),
    (0.00000005891, 3.58260177246, 309.27832265580),
    (0.00000006648, 5.55714129949, 209.36694217490),
    (0.00000005590, 2.47783944511, 1066.49547719000),
    (0.00000006192, 3.61231886519, 860.30992875280),
    (0.00000004231, 3.02212363572, 846.08283475120),
    (0.00000003612, 4.79935735435, 625.67019231240),
    (0.00000003398, 3.76732731354, 423.41679713830),
    (0.00000003387, 6.04222745633, 234.63973644040),
    (0.00000002578, 5.63610668746, 735.87651353180),
    (0.00000002831, 4.81642822334, 429.77958461370),
    (0.00000002817, 4.47516563908, 654.12438031560),
    (0.00000002573, 0.22467245054, 522.57741809380),
    (0.00000002610, 3.29126967191, 95.97922721780),
    (0.00000002419, 0.02986335489, 415.55249061210),
    (0.00000002112, 4.55964179603, 422.66603761290),
    (0.00000002304, 6.25081073546, 330.61896365820),
    (0.00000001758, 5.53430456858, 536.80451209540),
    (0.00000001814, 5.05675881426, 277.03499374140),
    (0.00000001550, 5.60375604692, 223.59403617650),
    (0.00000001457, 4.47767649852, 430.53034413910),
    (0.00000001607, 5.53599550100, 224.34479570190),
    (0.00000001172, 4.71017775994, 203.00415469950),
    (0.00000001231, 0.25115931880, 3.93215326310),
    (0.00000001105, 1.01595427676, 21.34064100240),
    (0.00000000868, 4.84623483952, 949.17560896980),
    (0.00000000939, 1.35429452093, 742.99006053260),
    (0.00000000693, 6.03599130692, 124.43341522100),
    (0.00000000712, 4.45550701473, 191.95845443560),
    (0.00000000690, 5.44243765037, 437.64389113990),
    (0.00000000810, 0.46198177342, 515.46387109300),
    (0.00000000694, 5.23748122403, 447.93883187840),
    (0.00000000604, 2.95749705544, 88.86568021700),
    (0.00000000669, 0.08457977809, 215.74677599280),
    (0.00000000579, 0.65329445948, 3.18139373770),
    (0.00000000712, 6.05964117622, 11.04570026390),
    (0.00000000698, 2.91371419321, 1073.60902419080),
    (0.00000000526, 2.24947851818, 1059.38193018920),
    (0.00000000511, 2.86838724347, 408.43894361130),
    (0.00000000589, 5.79268515755, 63.73589830340),
    (0.00000000519, 1.76641574095, 1279.79457262800),
    (0.00000000503, 5.73762297081, 728.76296653100),
    (0.00000000482, 4.68234512154, 838.96928775040),
    (0.00000000494, 4.04363805503, 490.33408917940),
    (0.00000000458, 1.17998315936, 210.85141488320),
    (0.00000000380, 5.28045750432, 1052.26838318840),
    (0.00000000404, 4.58953258519, 302.16477565500),
    (0.00000000377, 5.20131800999, 74.78159856730),
    (0.00000000328, 0.11893501088, 956.28915597060),
    (0.00000000290, 3.99300398632, 1162.47470440780),
    (0.00000000262, 2.04320741578, 1471.75302706360),
    (0.00000000259, 3.76206113036, 635.96513305090),
    (0.00000000254, 0.16694559092, 195.13984817330),
    (0.00000000309, 5.44921175960, 543.91805909620),
    (0.00000000237, 1.27761853769, 231.45834270270),
    (0.00000000288, 1.32449995239, 203.73786788240),
    (0.00000000229, 4.19748765966, 1265.56747862640),
    (0.00000000238, 4.02925601887, 643.07868005170),
    (0.00000000238, 0.49997895983, 10.29494073850),
    (0.00000000257, 3.69107889837, 867.42347575360),
    (0.00000000191, 0.17807919948, 628.85158605010),
    (0.00000000246, 5.62469599682, 351.81659230870),
    (0.00000000183, 3.38184740572, 636.71589257630),
    (0.00000000172, 3.83173494030, 1581.95934828300),
    (0.00000000220, 1.03443668151, 483.22054217860),
    (0.00000000217, 4.65210162713, 750.10360753340),
    (0.00000000143, 2.31969979791, 18.15924726470),
    (0.00000000137, 5.50046852846, 1169.58825140860),
    (0.00000000120, 3.70151294359, 416.30325013750),
    (0.00000000136, 3.38453909352, 1155.36115740700),
    (0.00000000149, 0.85459831932, 1375.77379984580),
    (0.00000000150, 5.71949902293, 618.55664531160),
    (0.00000000125, 4.82446274394, 436.89313161450),
    (0.00000000120, 3.26968058035, 1478.86657406440),
    (0.00000000131, 0.11496484259, 1898.35121793960),
    (0.00000000099, 4.57241894541, 643.82943957710),
    (0.00000000095, 4.92115458463, 650.94298657790),
    (0.00000000090, 2.09300085806, 621.73803904930),
    (0.00000000111, 0.11975665259, 831.85574074960),
    (0.00000000089, 2.54351587616, 85.82729883120),
    (0.00000000080, 5.09103451442, 340.77089204480),
    (0.00000000078, 3.17395501851, 497.44763618020),
    (0.00000000085, 0.18997660997, 1258.45393162560),
    (0.00000000081, 1.16732337173, 217.96496188400),
    (0.00000000072, 5.47328223678, 337.73251065900),
)

B3 = (
    (0.00000666252, 1.99006340181, 213.29909543800),
    (0.00000632350, 5.69778316807, 206.18554843720),
    (0.00000398051, 0.00000000000, 0.00000000000),
    (0.00000187838, 4.33779804809, 220.41264243880),
    (0.00000091884, 4.84104208217, 419.48464387520),
    (0.00000042369, 2.38073239056, 426.59819087600),
    (0.00000051548, 3.42149490328, 433.71173787680),
    (0.00000025661, 4.40167213109, 227.52618943960),
    (0.00000020551, 5.85313509872, 199.07200143640),
    (0.00000018081, 1.99321433229, 639.89728631400),
    (0.00000010874, 5.37344546547, 7.11354700080),
    (0.00000009590, 2.54901825866, 647.01083331480),
    (0.00000007085, 3.45518372721, 316.39186965660),
    (0.00000006002, 4.80055225135, 632.78373931320),
    (0.00000005778, 0.01680378777, 210.11770170030),
    (0.00000004881, 5.63719730884, 14.22709400160),
    (0.00000004501, 1.22424419010, 853.19638175200),
    (0.00000005542, 3.51756747774, 440.82528487760),
    (0.00000003548, 4.71299370890, 412.37109687440),
    (0.00000002851, 0.62679207578, 103.09277421860),
    (0.00000002173, 3.71982274459, 216.48048917570),
    (0.00000001991, 6.10867071657, 217.23124870110),
    (0.00000001435, 1.69177141453, 860.30992875280),
    (0.00000001217, 4.30778838827, 234.63973644040),
    (0.00000001157, 5.75027789902, 309.27832265580),
    (0.00000000795, 5.69026441157, 117.31986822020),
    (0.00000000733, 0.59842720676, 1066.49547719000),
    (0.00000000713, 0.21700311697, 625.67019231240),
    (0.00000000773, 5.48361981990, 202.25339517410),
    (0.00000000897, 2.65577866867, 654.12438031560),
    (0.00000000509, 2.86079833766, 429.77958461370),
    (0.00000000462, 4.17742567173, 529.69096509460),
    (0.00000000390, 6.11288036049, 191.95845443560),
    (0.00000000505, 4.51905764563, 323.50541665740),
    (0.00000000379, 3.74436004151, 223.59403617650),
    (0.00000000332, 5.49370890570, 21.34064100240),
    (0.00000000377, 5.25624813434, 95.97922721780),
    (0.00000000384, 4.48187414769, 330.61896365820),
    (0.00000000367, 5.03190929680, 846.08283475120),
    (0.00000000281, 1.14133888637, 735.87651353180),
    (0.00000000245, 5.81618253250, 423.41679713830),
    (0.00000000241, 1.70335120180, 522.57741809380),
    (0.00000000258, 3.69110118716, 447.93883187840),
    (0.00000000231, 4.15697626494, 110.20632121940),
    (0.00000000305, 5.97746884029, 302.16477565500),
    (0.00000000284, 0.66224572127, 203.00415469950),
    (0.00000000204, 1.54683820621, 209.36694217490),
    (0.00000000194, 4.21193801453, 124.43341522100),
    (0.00000000145, 4.79689259614, 88.86568021700),
    (0.00000000151, 3.82010884134, 536.80451209540),
    (0.00000000100, 0.03596545368, 949.17560896980),
    (0.00000000097, 0.91303450276, 1073.60902419080),
    (0.00000000110, 2.21197473966, 515.46387109300),
    (0.00000000084, 2.53842533109, 422.66603761290),
    (0.00000000085, 5.11102520704, 3.93215326310),
    (0.00000000077, 6.04074586787, 838.96928775040),
    (0.00000000085, 1.18898817378, 728.76296653100),
    (0.00000000084, 4.10158366806, 224.34479570190),
)

B4 = (
    (0.00000080384, 1.11918414679, 206.18554843720),
    (0.00000031660, 3.12218745098, 213.29909543800),
    (0.00000017143, 2.48073200414, 220.41264243880),
    (0.00000011844, 3.14159265359, 0.00000000000),
    (0.00000009005, 0.38441424927, 419.48464387520),
    (0.00000006164, 1.56186379537, 433.71173787680),
    (0.00000004660, 1.28235639570, 199.07200143640),
    (0.00000004775, 2.63498295487, 227.52618943960),
    (0.00000001487, 1.43096671616, 426.59819087600),
    (0.00000001424, 0.66988083613, 647.01083331480),
    (0.00000001075, 6.18092274059, 639.89728631400),
    (0.00000001145, 1.72041928134, 440.82528487760),
    (0.00000000682, 3.84841098180, 14.22709400160),
    (0.00000000655, 3.49486258327, 7.11354700080),
    (0.00000000456, 0.47338193402, 632.78373931320),
    (0.00000000509, 0.31432285584, 412.37109687440),
    (0.00000000343, 5.86413875355, 853.19638175200),
    (0.00000000270, 2.50125594913, 234.63973644040),
    (0.00000000197, 5.39156324804, 316.39186965660),
    (0.00000000236, 2.11084590211, 210.11770170030),
    (0.00000000172, 6.09682874401, 860.30992875280),
    (0.00000000159, 5.95049154821, 216.48048917570),
    (0.00000000100, 1.98534903594, 625.67019231240),
    (0.00000000112, 0.85526419268, 654.12438031560),
    (0.00000000115, 5.03884718594, 117.31986822020),
    (0.00000000115, 0.44589613974, 110.20632121940),
)

B5 = (
    (0.00000007895, 2.81927558645, 206.18554843720),
    (0.00000001014, 0.51187210270, 220.41264243880),
    (0.00000000772, 2.99484124049, 199.07200143640),
    (0.00000000967, 3.14159265359, 0.00000000000),
    (0.00000000583, 5.96456944075, 433.71173787680),
    (0.00000000588, 0.78008666397, 227.52618943960),
    (0.00000000445, 2.38630799074, 419.48464387520),
    (0.00000000098, 5.10622131539, 647.01083331480),
    (0.00000000091, 5.81659714144, 7.11354700080),
    (0.00000000088, 6.17828532308, 440.82528487760),
    (0.00000000089, 0.58396864530, 213.29909543800),
)

R0 = (
    (9.55758135801, 0.00000000000, 0.00000000000),
    (0.52921382465, 2.39226219733, 213.29909543800),
    (0.01873679934, 5.23549605091, 206.18554843720),
    (0.01464663959, 1.64763045468, 426.59819087600),
    (0.00821891059, 5.93520025371, 316.39186965660),
    (0.00547506899, 5.01532628454, 103.09277421860),
    (0.00371684449, 2.27114833428, 220.41264243880),
    (0.00361778433, 3.13904303264, 7.11354700080),
    (0.00140617548, 5.70406652991, 632.78373931320),
    (0.00108974737, 3.29313595577, 110.20632121940),
    (0.00069007015, 5.94099622447, 419.48464387520),
    (0.00061053350, 0.94037761156, 639.89728631400),
    (0.00048913044, 1.55733388472, 202.25339517410),
    (0.00034143794, 0.19518550682, 277.03499374140),
    (0.00032401718, 5.47084606947, 949.17560896980),
    (0.00020936573, 0.46349163993, 735.87651353180),
    (0.00020839118, 1.52102590640, 433.71173787680),
    (0.00020746678, 5.33255667599, 199.07200143640),
    (0.00015298457, 3.05943652881, 529.69096509460),
    (0.00014296479, 2.60433537909, 323.50541665740),
    (0.00011993314, 5.98051421881, 846.08283475120),
    (0.00011380261, 1.73105746566, 522.57741809380),
    (0.00012884128, 1.64892310393, 138.51749687070),
    (0.00007752769, 5.85191318903, 95.97922721780),
    (0.00009796061, 5.20475863996, 1265.56747862640),
    (0.00006465967, 0.17733160145, 1052.26838318840),
    (0.00006770621, 3.00433479284, 14.22709400160),
    (0.00005850443, 1.45519636076, 415.55249061210),
    (0.00005307481, 0.59737534050, 63.73589830340),
    (0.00004695746, 2.14919036956, 227.52618943960),
    (0.00004043988, 1.64010323863, 209.36694217490),
    (0.00003688132, 0.78016133170, 412.37109687440),
    (0.00003376457, 3.69528478828, 224.34479570190),
    (0.00002885348, 1.38764077631, 838.96928775040),
    (0.00002976033, 5.68467931117, 210.11770170030),
    (0.00003419551, 4.94549148887, 1581.95934828300),
    (0.00003460943, 1.85088802878, 175.16605980020),
    (0.00003400616, 0.55386747515, 350.33211960040),
    (0.00002507630, 3.53851863255, 742.99006053260),
    (0.00002448325, 6.18412386316, 1368.66025284500),
    (0.00002406138, 2.96559220267, 117.31986822020),
    (0.00002881181, 0.17960757891, 853.19638175200),
    (0.00002173959, 0.01508587396, 340.77089204480),
    (0.00002024483, 5.05411271271, 11.04570026390),
    (0.00001740254, 2.34657043464, 309.27832265580),
    (0.00001861397, 5.93361638244, 625.67019231240),
    (0.00001888436, 0.02968443389, 3.93215326310),
    (0.00001610859, 1.17302463549, 74.78159856730),
    (0.00001462631, 1.92588134017, 216.48048917570),
    (0.00001474547, 5.67670461130, 203.73786788240),
    (0.00001395109, 5.93669404929, 127.47179660680),
    (0.00001781165, 0.76314388077, 217.23124870110),
    (0.00001817186, 5.77713225779, 490.33408917940),
    (0.00001472392, 1.40064915651, 137.03302416240),
    (0.00001304089, 0.77235613966, 647.01083331480),
    (0.00001149773, 5.74021249703, 1162.47470440780),
    (0.00001126667, 4.46707803791, 265.98929347750),
    (0.00001277489, 2.98412586423, 1059.38193018920),
    (0.00001207053, 0.75285933160, 351.81659230870),
    (0.00001071399, 1.13567265104, 1155.36115740700),
    (0.00001020922, 5.91233512844, 1685.05212250160),
    (0.00001315042, 5.11202572637, 211.81462272970),
    (0.00001295553, 4.69184139933, 1898.35121793960),
    (0.00001099037, 1.81765118601, 149.56319713460),
    (0.00000998462, 2.63131596867, 200.76892246580),
    (0.00000985869, 2.25992849742, 956.28915597060),
    (0.00000932434, 3.66980793184, 554.06998748280),
    (0.00000664481, 0.60297724821, 728.76296653100),
    (0.00000659850, 4.66635439533, 195.13984817330),
    (0.00000617740, 5.62092000007, 942.06206196900),
    (0.00000626382, 5.94208232590, 1478.86657406440),
    (0.00000482230, 1.84070179496, 479.28838891550),
    (0.00000487689, 2.79373616806, 3.18139373770),
    (0.00000470086, 0.83847755040, 1471.75302706360),
    (0.00000451817, 5.64468459871, 2001.44399215820),
    (0.00000553128, 3.41088600844, 269.92144674060),
    (0.00000534397, 1.26443331367, 275.55052103310),
    (0.00000472572, 1.88198584660, 515.46387109300),
    (0.00000405434, 1.64001413521, 536.80451209540),
    (0.00000517196, 4.44310450526, 2214.74308759620),
    (0.00000452848, 3.00349117198, 302.16477565500),
    (0.00000494340, 2.28626675074, 278.51946644970),
    (0.00000489825, 5.80631420383, 191.20769491020),
    (0.00000427459, 0.05741344372, 284.14854074220),
    (0.00000339763, 1.40198657693, 440.82528487760),
    (0.00000340627, 0.89091104306, 628.85158605010),
    (0.00000385974, 1.99700402508, 1272.68102562720),
    (0.00000288298, 1.12160250272, 422.66603761290),
    (0.00000294444, 0.42577061903, 312.19908396260),
    (0.00000262490, 0.31753439818, 1045.15483618760),
    (0.00000295331, 0.67144493789, 88.86568021700),
    (0.00000342968, 5.85600322299, 1795.25844372100),
    (0.00000341117, 2.37585247250, 525.49817940060),
    (0.00000234018, 4.22756813216, 114.13847448250),
    (0.00000223729, 2.28129446763, 330.61896365820),
    (0.00000275814, 0.47832439352, 38.13303563780),
    (0.00000224592, 0.54754005675, 1788.14489672020),
    (0.00000303300, 0.87946670205, 6069.77675455340),
    (0.00000292103, 6.21420611920, 210.85141488320),
    (0.00000226121, 0.37495223398, 142.44965013380),
    (0.00000277257, 5.31917702012, 692.58748435350),
    (0.00000242911, 5.37187983246, 1258.45393162560),
    (0.00000205571, 0.95755250527, 288.08069400530),
    (0.00000207567, 5.38126259725, 2317.83586181480),
    (0.00000186835, 6.03591766061, 404.50679034820),
    (0.00000218536, 5.25607043545, 212.33588759150),
    (0.00000222155, 5.94588016768, 39.35687591520),
    (0.00000179673, 4.41045924362, 408.43894361130),
    (0.00000241440, 1.12525868110, 388.46515523820),
    (0.00000197093, 3.90141942850, 52.69019803950),
    (0.00000236639, 0.90802744873, 1375.77379984580),
    (0.00000171915, 5.56318632797, 213.34727954780),
    (0.00000169865, 2.85667554010, 99.16062095550),
    (0.00000214398, 4.20253525974, 2531.13495725280),
    (0.00000172010, 2.36537801012, 213.25091132820),
    (0.00000165707, 2.63679789706, 215.74677599280),
    (0.00000230892, 5.49463421262, 191.95845443560),
    (0.00000177585, 0.38155817719, 430.53034413910),
    (0.00000191514, 2.95906900704, 437.64389113990),
    (0.00000163250, 3.45832517280, 617.80588578620),
    (0.00000162305, 5.73050678664, 203.00415469950),
    (0.00000175108, 5.71404465044, 1066.49547719000),
    (0.00000183041, 5.66851947172, 2111.65031337760),
    (0.00000150077, 4.40663921925, 417.03696332040),
    (0.00000187935, 6.07916265661, 563.63121503840),
    (0.00000145127, 5.08176368814, 423.41679713830),
    (0.00000137491, 5.43912787991, 222.86032299360),
    (0.00000172824, 1.84920994090, 1589.07289528380),
    (0.00000165478, 2.89132196119, 214.26230328450),
    (0.00000145727, 1.56565192483, 831.85574074960),
    (0.00000176864, 2.30323752987, 9999.98645077300),
    (0.00000128877, 2.55338644107, 414.06801790380),
    (0.00000120093, 0.04329750542, 1361.54670584420),
    (0.00000143441, 0.99817357720, 76.26607127560),
    (0.00000108747, 2.09282278191, 207.67002114550),
    (0.00000132106, 2.85902597898, 312.45971639350),
    (0.00000112238, 0.26221759151, 2104.53676637680),
    (0.00000125186, 4.78354048063, 205.22234059070),
    (0.00000104427, 3.63671899047, 65.22037101170),
    (0.00000107447, 3.67064138701, 212.77783057620),
    (0.00000108642, 2.85492389024, 21.34064100240),
    (0.00000097743, 5.12231845599, 2634.22773147140),
    (0.00000109097, 1.63231061493, 208.63322899200),
    (0.00000096852, 4.19928280035, 305.34616939270),
    (0.00000096507, 2.56002066845, 1692.16566950240),
    (0.00000085829, 4.54545085982, 210.37833413120),
    (0.00000099249, 5.13816222131, 1574.84580128220),
    (0.00000112532, 5.03109281265, 703.63318461740),
    (0.00000084023, 1.18337717265, 429.77958461370),
    (0.00000089021, 5.38791571457, 107.02492748170),
    (0.00000110191, 2.43656081234, 355.74874557180),
    (0.00000090659, 4.20908809746, 213.82036029980),
    (0.00000095885, 5.44594259071, 2428.04218303420),
    (0.00000094109, 2.39786381418, 483.22054217860),
    (0.00000085609, 0.03354346966, 860.30992875280),
    (0.00000088796, 4.05766306750, 128.95626931510),
    (0.00000081951, 1.66499731549, 62.25142559510),
    (0.00000091240, 3.96942332591, 2847.52682690940),
    (0.00000083961, 4.60845858022, 177.87437278590),
    (0.00000088376, 3.86800515885, 140.00196957900),
    (0.00000093308, 0.73846639887, 831.10498122420),
    (0.00000091872, 2.94977605320, 35.42472265210),
    (0.00000087077, 1.33390590052, 1905.46476494040),
    (0.00000096584, 4.84438390997, 131.40394986990),
    (0.00000071010, 0.99334817658, 405.25754987360),
    (0.00000095266, 2.51506908152, 2.44768055480),
    (0.00000072514, 4.63213873657, 245.54242435240),
    (0.00000082580, 1.52823217919, 145.63104387150),
    (0.00000076693, 3.15240783008, 767.36908292080),
    (0.00000070317, 4.04253707270, 173.94221952280),
    (0.00000086015, 2.30103727270, 85.82729883120),
    (0.00000066529, 4.75053522835, 70.84944530420),
    (0.00000065835, 2.46869725001, 280.96714700450),
    (0.00000064824, 0.09343869325, 9.56122755560),
    (0.00000071557, 0.01212415296, 565.11568774670),
    (0.00000066533, 1.08034871114, 339.28641933650),
    (0.00000063488, 2.01740971153, 234.63973644040),
    (0.00000060786, 5.12026947473, 756.32338265690),
    (0.00000058123, 6.05732868566, 1677.93857550080),
    (0.00000064236, 1.28586474622, 1148.24761040620),
    (0.00000073124, 4.37810889148, 425.11371816770),
    (0.00000055012, 3.85865703217, 342.25536475310),
    (0.00000057101, 6.26689214029, 2420.92863603340),
    (0.00000064090, 4.09854757476, 327.43756992050),
    (0.00000055306, 1.60456896521, 543.02428721890),
    (0.00000057987, 5.47269124340, 347.88443904560),
    (0.00000073581, 3.72292337326, 92.04707395470),
    (0.00000073760, 3.57045342615, 1.48447270830),
    (0.00000064940, 2.44739629174, 267.47376618580),
    (0.00000054414, 3.71479080197, 344.70304530790),
    (0.00000049783, 3.93453970179, 192.69216761850),
    (0.00000049537, 3.22831070579, 333.65734504400),
    (0.00000047539, 3.92925402178, 199.28444975750),
    (0.00000049368, 4.90341763553, 217.49188113200),
    (0.00000062711, 4.40120079629, 214.78356814630),
    (0.00000046359, 2.09430260266, 212.54833591260),
    (0.00000046289, 2.64038453480, 10.29494073850),
    (0.00000054335, 1.07179534996, 362.86229257260),
    (0.00000058742, 2.62270940799, 225.82926841020),
    (0.00000048457, 3.15166418511, 216.21985674480),
    (0.00000046316, 4.86226642770, 2950.61960112800),
    (0.00000045970, 4.97297391881, 198.32124191100),
    (0.00000046678, 2.44960215701, 207.14875628370),
    (0.00000044905, 1.77616995803, 223.59403617650),
    (0.00000044521, 5.55987055442, 264.50482076920),
    (0.00000055914, 4.29520232351, 329.72519178090),
    (0.00000049643, 5.20789299388, 2744.43405269080),
    (0.00000058829, 4.23073947869, 700.66423920080),
    (0.00000052629, 3.79230629070, 343.21857259960),
    (0.00000041532, 0.74488808688, 125.98732389850),
    (0.00000047767, 2.39260015876, 207.88246946660),
    (0.00000056157, 2.07214273531, 124.43341522100),
    (0.00000043345, 1.83707598036, 106.27416795630),
    (0.00000039793, 4.00870764324, 12.53017297220),
    (0.00000053882, 4.97905460628, 134.58534360760),
    (0.00000050135, 5.75914508514, 320.32402291970),
    (0.00000044960, 5.35721924134, 218.92816973050),
    (0.00000041089, 4.92252591399, 1891.23767093880),
    (0.00000046509, 2.06623129884, 2008.55753915900),
    (0.00000042949, 0.39856812529, 357.44566660120),
    (0.00000037992, 2.06495914285, 247.23934538180),
    (0.00000048733, 5.32762223699, 3127.31333126180),
    (0.00000034583, 5.62555932761, 99.91138048090),
    (0.00000041092, 2.47264897370, 237.67811782620),
    (0.00000040763, 4.08408559215, 621.73803904930),
    (0.00000034213, 0.73077393007, 750.10360753340),
    (0.00000033967, 5.31264617621, 206.23373254700),
    (0.00000036509, 1.68826775750, 22.09140052780),
    (0.00000039361, 3.45730719990, 241.61027108930),
    (0.00000034796, 2.24780137629, 487.36514376280),
    (0.00000033049, 4.86593901955, 209.10630974400),
    (0.00000032584, 2.22713131846, 319.57326339430),
    (0.00000039035, 3.73870591196, 3163.91869656600),
    (0.00000032722, 1.06640549236, 252.65597135320),
    (0.00000038671, 4.39617126814, 18.15924726470),
    (0.00000034514, 1.82607500690, 380.12776796000),
    (0.00000041539, 0.08136234251, 210.33015002140),
    (0.00000033527, 5.80475568528, 251.43213107580),
    (0.00000031221, 1.96489151107, 244.31858407500),
    (0.00000030521, 2.26854188579, 1169.58825140860),
    (0.00000034828, 5.96324553131, 217.96496188400),
    (0.00000038481, 4.43707551964, 160.60889739850),
    (0.00000035998, 3.83262381556, 56.62235130260),
    (0.00000031041, 4.89914223233, 144.14657116320),
    (0.00000032342, 3.58191018804, 231.45834270270),
    (0.00000028838, 5.80081031514, 1994.33044515740),
    (0.00000032175, 2.13166877923, 206.13736432740),
    (0.00000032643, 1.93131580544, 98.89998852460),
    (0.00000034917, 5.65276617691, 497.44763618020),
    (0.00000028928, 2.21653288920, 14.97785352700),
    (0.00000031569, 3.81846560564, 73.29712585900),
    (0.00000032199, 0.99811846290, 1464.63948006280),
    (0.00000029153, 5.98414099408, 2737.32050569000),
    (0.00000036706, 4.75493516597, 348.84764689210),
    (0.00000028665, 1.68732054583, 78.71375183040),
    (0.00000027501, 6.12086395418, 214.04985496340),
    (0.00000028795, 0.04448605904, 5.62907429250),
    (0.00000027205, 0.24587543816, 313.21047591890),
    (0.00000032441, 3.77921585847, 33.94024994380),
    (0.00000027088, 5.20310098020, 148.07872442630),
    (0.00000034956, 3.43886187587, 273.10284047830),
    (0.00000033076, 2.44662095168, 969.62247809490),
    (0.00000027745, 1.44598606685, 258.87574647670),
    (0.00000027178, 4.25918596220, 179.35884549420),
    (0.00000027872, 0.78772093522, 546.95644048200),
    (0.00000029106, 4.83947711462, 905.88657979150),
    (0.00000027417, 2.44930366818, 254.94359321360),
    (0.00000034296, 6.00920969644, 166.82867252200),
    (0.00000028859, 6.02917249910, 188.92007304980),
    (0.00000026001, 0.65046992484, 654.12438031560),
    (0.00000033560, 1.23732329127, 2221.85663459700),
    (0.00000024356, 0.52248751330, 894.84087952760),
    (0.00000027767, 5.17820678484, 5.41662597140),
    (0.00000025568, 3.35897159622, 0.96320784650),
    (0.00000022879, 3.51293480690, 458.84151979040),
    (0.00000024496, 0.00976884124, 69.15252427480),
    (0.00000028794, 0.75545700854, 488.84961647110),
    (0.00000031228, 2.05299907796, 282.45161971280),
    (0.00000025438, 5.29037729250, 636.71589257630),
    (0.00000025332, 4.97007969450, 3060.82592234740),
    (0.00000023596, 2.54766434769, 196.62432088160),
    (0.00000029602, 3.92688207792, 206.70681329900),
    (0.00000028255, 2.72125009693, 32.24332891440),
    (0.00000022115, 4.75775237642, 213.18722085340),
    (0.00000022130, 3.25436709191, 681.54178408960),
    (0.00000021675, 4.61403328597, 3267.01147078460),
    (0.00000022115, 3.16759500067, 213.41097002260),
    (0.00000026912, 2.86269769133, 24.37902238820),
    (0.00000020737, 1.66895754198, 274.06604832480),
    (0.00000028309, 4.73122154345, 552.58551477450),
    (0.00000025252, 5.11986371899, 168.05251279940),
    (0.00000026364, 1.59272536419, 491.81856188770),
    (0.00000021995, 0.88079009280, 635.96513305090),
    (0.00000027076, 5.53694832022, 555.55446019110),
    (0.00000019683, 2.14388519695, 54.17467074780),
    (0.00000027266, 3.57891326986, 561.18353448360),
    (0.00000025162, 1.78070903718, 182.27960680100),
    (0.00000021386, 3.86030772476, 116.42609634290),
    (0.00000025572, 1.62093861709, 2324.94940881560),
    (0.00000020025, 2.90618582553, 120.35824960600),
    (0.00000019882, 5.59203696008, 4.19278569400),
    (0.00000019454, 0.10623632006, 218.71572140940),
    (0.00000025617, 2.09931460158, 248.72381809010),
    (0.00000019804, 2.52180124343, 1485.98012106520),
    (0.00000018516, 2.54810951896, 213.51154375910),
    (0.00000019831, 0.07955320843, 842.15068148810),
    (0.00000018516, 5.37755110510, 213.08664711690),
    (0.00000023655, 1.59974907716, 738.79727483860),
    (0.00000020375, 2.94653107321, 59.80374504030),
    (0.00000024247, 3.15387696867, 240.38643081190),
    (0.00000018294, 3.18715992969, 295.05122865420),
    (0.00000017464, 2.90471803626, 477.80391620720),
    (0.00000020698, 1.07232100334, 494.26624244250),
    (0.00000020400, 1.83665590916, 533.62311835770),
    (0.00000021285, 0.63341794388, 189.72322220190),
    (0.00000016116, 0.60069688498, 746.92221379570),
    (0.00000016297, 3.98317294128, 2.92076130680),
    (0.00000016922, 4.74266972033, 2207.62954059540),
    (0.00000020479, 6.05098286202, 173.68158709190),
    (0.00000015447, 1.49120311247, 543.91805909620),
    (0.00000019944, 4.94086632750, 121.25202148330),
    (0.00000017127, 0.71458025372, 1781.03134971940),
    (0.00000017240, 0.67749766724, 151.04766984290),
    (0.00000015574, 5.70296527381, 3053.71237534660),
    (0.00000015036, 5.52770334605, 2310.72231481400),
    (0.00000015928, 4.45642717299, 643.82943957710),
    (0.00000016165, 0.63286131026, 358.93013930950),
    (0.00000014589, 5.26158292613, 472.17484191470),
    (0.00000016545, 3.52813228069, 3480.31056622260),
    (0.00000018912, 0.55218675639, 4.66586644600),
    (0.00000017595, 2.26495491189, 672.14061522840),
    (0.00000018104, 2.71285673689, 181.80652604900),
    (0.00000015918, 5.23446779429, 135.54855145410),
    (0.00000013931, 3.19357128657, 213.55972786890),
    (0.00000014058, 0.82375896652, 221.37585028530),
    (0.00000013931, 4.73208739639, 213.03846300710),
    (0.00000014690, 2.65882838685, 292.01284726840),
    (0.00000014454, 0.21819892811, 235.39049596580),
    (0.00000016168, 0.91025406068, 280.00393915800),
    (0.00000013327, 3.54947442109, 205.66428357540),
    (0.00000016104, 0.82547975762, 176.65053250850),
    (0.00000016441, 5.39398801335, 424.15051032120),
    (0.00000012747, 0.75780958758, 721.64941953020),
    (0.00000012754, 3.55466871752, 153.49535039770),
    (0.00000014448, 0.12049617049, 313.68355667090),
    (0.00000016499, 3.26383140489, 6283.07584999140),
    (0.00000016564, 1.62649604519, 5856.47765911540),
    (0.00000014950, 1.23923264394, 2641.34127847220),
    (0.00000015724, 1.18874754834, 486.40193591630),
    (0.00000011893, 0.91693668558, 416.30325013750),
    (0.00000011684, 1.11385455828, 81.75213321620),
    (0.00000012985, 4.74373293725, 3377.21779200400),
    (0.00000011864, 0.64411806416, 28.31117565130),
    (0.00000013216, 4.95904024430, 1279.79457262800),
    (0.00000016121, 0.98185208328, 2538.24850425360),
    (0.00000014900, 1.76649832526, 569.04784100980),
    (0.00000011337, 4.36555105334, 3583.40334044120),
    (0.00000011253, 5.98638731448, 193.65537546500),
    (0.00000014753, 2.92291248767, 167.08930495290),
    (0.00000013774, 2.50808183571, 1802.37199072180),
    (0.00000011068, 0.00471764868, 629.60234557550),
    (0.00000012781, 3.62178749219, 67.66805156650),
    (0.00000012238, 0.27163151602, 1044.40407666220),
    (0.00000011021, 0.15223056578, 501.37978944330),
    (0.00000014206, 2.63254885854, 618.55664531160),
    (0.00000014365, 0.37819794671, 601.76425067620),
    (0.00000015034, 2.67095006272, 46.47042291600),
    (0.00000012248, 2.19751851112, 650.94298657790),
    (0.00000010783, 2.86375137884, 113.38771495710),
    (0.00000011418, 1.20874560246, 172.24529849340),
    (0.00000014613, 6.05645353059, 468.24268865160),
    (0.00000010580, 2.05903854864, 429.04587143080),
    (0.00000013721, 2.20936291526, 228.27694896500),
    (0.00000012180, 1.82585577726, 241.87090352020),
    (0.00000010787, 5.06924118186, 162.89651925890),
    (0.00000012056, 3.20018724042, 72.07328558160),
    (0.00000012233, 4.50741930970, 425.63498302950),
    (0.00000012101, 4.14977794161, 1108.13997496560),
    (0.00000009843, 1.49451039604, 226.63241756230),
    (0.00000010287, 2.10680007784, 1033.35837639830),
    (0.00000009975, 2.81640446254, 518.64526483070),
    (0.00000009597, 4.80028087522, 426.64637498580),
    (0.00000010746, 4.66838299108, 129.91947716160),
    (0.00000012961, 5.11568581806, 219.44943459230),
    (0.00000012302, 5.33568547700, 776.93031047640),
    (0.00000009484, 4.85702954575, 820.05928096030),
    (0.00000011441, 3.85769732764, 405.99126305650),
    (0.00000009625, 1.60280478656, 426.55000676620),
    (0.00000009164, 0.70204567980, 403.02231763990),
    (0.00000010112, 2.76486875630, 210.59078245230),
    (0.00000010816, 1.36864298163, 170.76082578510),
    (0.00000010187, 2.36063948382, 685.47393735270),
    (0.00000012397, 6.06349943525, 875.83029900100),
    (0.00000012146, 2.04060386262, 508.35032409220),
    (0.00000009574, 3.19555214859, 286.59622129700),
    (0.00000010193, 4.01123146905, 381.35160823740),
    (0.00000008900, 3.63260235880, 319.31263096340),
    (0.00000010052, 5.16107251040, 216.00740842370),
    (0.00000008528, 3.88076551354, 630.33605875840),
    (0.00000008875, 5.46623776078, 3370.10424500320),
    (0.00000008401, 5.65557131026, 213.45915413240),
    (0.00000010033, 5.97497644283, 6.15033915430),
    (0.00000008401, 2.27009862215, 213.13903674360),
    (0.00000011661, 0.95163302252, 694.07195706180),
    (0.00000008696, 2.33868966556, 220.36445832900),
    (0.00000008141, 5.54059747150, 220.46082654860),
    (0.00000009615, 2.75755414306, 556.51766803760),
    (0.00000009120, 0.44322374149, 2097.42321937600),
    (0.00000008109, 5.53989498262, 181.05576652360),
    (0.00000010763, 0.05616402982, 691.10301164520),
    (0.00000009579, 2.84979792871, 184.09414790940),
    (0.00000009958, 2.38581008546, 945.24345570670),
    (0.00000008526, 0.17821781104, 289.56516671360),
    (0.00000007700, 0.00481375410, 7.16173111060),
    (0.00000008613, 0.82900327241, 2957.73314812880),
    (0.00000009517, 2.27516458273, 8.07675484730),
    (0.00000009049, 3.37335025790, 731.94436026870),
    (0.00000007888, 5.78452089815, 230.82520325630),
    (0.00000007684, 3.10462250617, 7.06536289100),
    (0.00000007391, 5.29648701813, 2627.11418447060),
    (0.00000009875, 4.69411059509, 10213.28554621100),
    (0.00000007328, 0.09051133382, 100.64509366380),
    (0.00000007999, 1.60928374337, 696.51963761660),
    (0.00000007600, 4.90078510977, 51.20572533120),
    (0.00000009928, 5.25713005643, 699.70103135430),
    (0.00000007333, 5.61982406824, 31.49256938900),
    (0.00000007376, 4.52737009022, 616.32141307790),
    (0.00000009422, 2.44475274779, 2118.76386037840),
    (0.00000007300, 4.01885475010, 212.02707105080),
    (0.00000007502, 4.71301501745, 436.15941843160),
    (0.00000009071, 2.75662160229, 130.44074202340),
    (0.00000008913, 2.19608557019, 427.56139872250),
    (0.00000008801, 4.26655882704, 141.22580985640),
    (0.00000006853, 5.69082635009, 480.77286162380),
    (0.00000007765, 3.27218537808, 3796.70243587920),
    (0.00000009159, 3.04713671650, 9786.68735533500),
    (0.00000009034, 2.04165937353, 204.70107572890),
    (0.00000006902, 4.61962635489, 2524.02141025200),
    (0.00000006728, 0.58794595002, 739.80866679490),
    (0.00000006741, 0.52362906624, 135.33610313300),
    (0.00000008201, 5.03994203224, 411.62033734900),
    (0.00000007240, 3.90653111215, 214.57111982520),
    (0.00000006887, 4.11954799957, 662.53120356300),
    (0.00000006566, 2.67659365854, 194.17664032680),
    (0.00000006539, 6.25585361704, 31.01948863700),
    (0.00000007484, 5.56871021201, 271.40591944890),
    (0.00000008078, 3.09955817560, 353.30106501700),
    (0.00000007072, 1.10066698352, 282.66406803390),
    (0.00000006089, 0.79684364835, 593.42686339800),
    (0.00000006140, 3.79672343724, 180.16199464630),
    (0.00000006703, 3.82854248620, 412.58354519550),
    (0.00000006024, 5.46288776207, 724.83081326790),
    (0.00000008102, 4.51051495778, 268.43697403230),
    (0.00000006033, 1.24326252021, 447.93883187840),
    (0.00000007425, 2.29394888999, 532.61172640140),
    (0.00000006007, 2.87215425398, 426.07692601420),
    (0.00000007568, 0.79147591036, 2854.64037391020),
    (0.00000005816, 1.70824982811, 50.40257617910),
    (0.00000007534, 5.38598292680, 953.10776223290),
    (0.00000005863, 2.04201456623, 454.90936652730),
    (0.00000007291, 0.88044346877, 457.61767951300),
    (0.00000006235, 4.51960341418, 3693.60966166060),
    (0.00000006359, 6.27053660532, 313.94418910180),
    (0.00000005722, 0.47241118592, 610.69233878540),
    (0.00000005704, 0.45599464136, 643.07868005170),
    (0.00000006176, 3.98739420856, 835.03713448730),
    (0.00000005730, 0.50814242490, 1038.04128918680),
    (0.00000006812, 4.20463385690, 938.12990870590),
    (0.00000005620, 4.08049141112, 3899.79521009780),
    (0.00000006770, 4.22172125738, 916.93228005540),
    (0.00000006069, 3.46762401122, 278.25883401880),
    (0.00000005875, 5.51773010551, 1073.60902419080),
    (0.00000005558, 3.29478679376, 20.60692781950),
    (0.00000006274, 4.88767368263, 0.52126486180),
    (0.00000005794, 4.09991767938, 391.17346822390),
    (0.00000005442, 2.79802608247, 397.39324334740),
    (0.00000005754, 4.42718264879, 165.60483224460),
    (0.00000005879, 6.17871525366, 291.26208774300),
    (0.00000006716, 2.18663847730, 627.36711334180),
    (0.00000005761, 0.62536160332, 114.39910691340),
    (0.00000005359, 2.29390692216, 331.20966448920),
    (0.00000006210, 4.92273259045, 450.97721326420),
    (0.00000006686, 2.13438181268, 285.63301345050),
    (0.00000005173, 4.10128119721, 6.59228213900),
    (0.00000005707, 3.48716972669, 230.56457082540),
    (0.00000006363, 5.64626069194, 518.38463239980),
    (0.00000005241, 3.78081098206, 418.52143602870),
    (0.00000005191, 4.39595146262, 84.34282612290),
    (0.00000006710, 2.96748528229, 624.91943278700),
    (0.00000004931, 2.71959451867, 558.00214074590),
    (0.00000005225, 4.65463431385, 310.71461125430),
    (0.00000004857, 2.61373582429, 66.70484372000),
    (0.00000004847, 3.76991373317, 423.67742956920),
    (0.00000005284, 1.96024672163, 1182.92157353290),
    (0.00000005933, 2.74003948393, 219.89137757700),
    (0.00000006373, 1.41296346460, 606.76018552230),
    (0.00000004728, 0.23421038001, 1063.31408345230),
    (0.00000006408, 1.16687419680, 268.95823889410),
    (0.00000004782, 1.56813683227, 420.96911658350),
    (0.00000005399, 4.57611449409, 238.90195810360),
    (0.00000005161, 0.14436456585, 2413.81508903260),
    (0.00000004858, 5.21378840436, 3686.49611465980),
    (0.00000005086, 1.73392381835, 337.73251065900),
    (0.00000004650, 3.71029121290, 305.08553696180),
    (0.00000004896, 3.67786531840, 240.12579838100),
    (0.00000005949, 0.29956165181, 524.01370669230),
    (0.00000004968, 2.53258931342, 980.66817835880),
    (0.00000004944, 2.16189522746, 104.05598206510),
    (0.00000005366, 3.54867806985, 107.28555991260),
    (0.00000004917, 0.48641512683, 3274.12501778540),
    (0.00000005617, 6.27593478237, 112.65400177420),
    (0.00000004524, 5.09539085552, 103.14095832840),
    (0.00000005643, 1.52724336480, 105.54045477340),
    (0.00000004504, 1.68251875362, 196.03362005060),
    (0.00000004897, 4.90011892854, 102.12956637210),
    (0.00000004525, 1.88735156553, 103.04459010880),
    (0.00000004327, 1.45407229380, 409.92341631960),
    (0.00000005095, 3.40640608336, 427.11945573780),
    (0.00000005782, 3.55197606731, 25874.60404613620),
    (0.00000004192, 0.16603430914, 958.57677783100),
    (0.00000004976, 0.50639895683, 511.53171782990),
    (0.00000004167, 5.94725762070, 316.44005376640),
    (0.00000004353, 3.78587101731, 1171.87587326900),
    (0.00000005387, 2.03693287651, 2435.15573003500),
    (0.00000004067, 4.66592603130, 106.01353552540),
    (0.00000004817, 3.53529781673, 960.22130923370),
    (0.00000004048, 3.20024146722, 775.23338944700),
    (0.00000004016, 6.00569143107, 945.99421523210),
    (0.00000003989, 3.15130319196, 115.62294719080),
    (0.00000004559, 5.59555355771, 778.41478318470),
    (0.00000004153, 2.75042736587, 316.34368554680),
    (0.00000003983, 2.00842137744, 597.35901666110),
    (0.00000004212, 4.16852690218, 823.99143422340),
    (0.00000005193, 0.71717111984, 810.65811209910),
    (0.00000003927, 5.04361736754, 2943.50605412720),
    (0.00000004225, 0.02571003853, 0.75075952540),
    (0.00000004926, 1.12994881124, 526.98265210890),
    (0.00000004170, 3.94116290117, 422.40540518200),
    (0.00000004432, 3.99599046800, 393.46109008430),
    (0.00000003840, 1.21234108241, 212.07525516060),
    (0.00000003866, 4.20930793423, 97.67614824720),
    (0.00000004440, 1.35536679738, 211.60217440860),
    (0.00000003840, 0.43014354282, 214.52293571540),
    (0.00000004724, 3.62039208608, 638.41281360570),
    (0.00000004870, 5.75874599620, 1246.65747183630),
    (0.00000004449, 1.43384065964, 184.98791978670),
    (0.00000003931, 2.36660272585, 909.81873305460),
    (0.00000003787, 5.98932416906, 325.95309721220),
    (0.00000003665, 0.72917314141, 20.44686912510),
    (0.00000004243, 2.29103096797, 453.42489381900),
    (0.00000003730, 6.24831601183, 159.12442469020),
    (0.00000003900, 1.31013240315, 850.01498801430),
    (0.00000005134, 1.97348901289, 526.50957135690),
    (0.00000003621, 2.77435773661, 123.53964334370),
    (0.00000003607, 5.32058842710, 406.95447090300),
    (0.00000003802, 1.94444523548, 421.18156490460),
    (0.00000003906, 3.02475451573, 317.35507750310),
    (0.00000004473, 0.80804073855, 838.21852822500),
    (0.00000004081, 2.08732468180, 988.53248488500),
    (0.00000003843, 4.99347148246, 7.63481186260),
    (0.00000004467, 6.09037793116, 760.25553592000),
    (0.00000003514, 3.97285766412, 426.48631629140),
    (0.00000003504, 0.85064201666, 299.12639426920),
    (0.00000004397, 1.68577228317, 824.74219374880),
    (0.00000003581, 2.35235960566, 337.80194662820),
    (0.00000004606, 3.48411642192, 913.96333463880),
    (0.00000003790, 3.64538213705, 216.26804085460),
    (0.00000003496, 0.95035381131, 436.89313161450),
    (0.00000004422, 0.82822191292, 43.28902917830),
    (0.00000003688, 2.83785443800, 739.05790726950),
    (0.00000004439, 1.19409419107, 421.93232443000),
    (0.00000003572, 2.77298538478, 444.75743814070),
    (0.00000004420, 5.44308967028, 963.40270297140),
    (0.00000004443, 3.73070830296, 37.87240320690),
    (0.00000004322, 4.75680702521, 40.84134862350),
    (0.00000003724, 0.59005210557, 256.42806592190),
    (0.00000004471, 2.22367643527, 318.83955021140),
    (0.00000004184, 1.52719196640, 298.23262239190),
    (0.00000003534, 5.01937599570, 386.98068252990),
    (0.00000003400, 3.22663067085, 4113.09430553580),
    (0.00000004556, 1.35715974815, 495.75071515080),
    (0.00000004453, 1.80417064247, 829.62050851590),
    (0.00000003617, 1.51036385224, 41.64449777560),
    (0.00000003789, 4.80357656146, 238.42887735160),
    (0.00000003514, 2.38272766645, 426.71006546060),
    (0.00000003208, 1.74465274123, 952.35700270750),
    (0.00000004398, 2.65839000906, 832.58945393250),
    (0.00000004092, 3.07954777295, 60.76695288680),
    (0.00000003813, 5.63047104819, 315.42866181010),
    (0.00000003219, 6.22278803635, 754.83890994860),
    (0.00000003102, 2.69222024257, 343.73983746140),
    (0.00000004045, 4.02463772100, 376.19561469690),
    (0.00000003576, 0.38532787280, 214.99601646740),
    (0.00000003291, 5.49542015261, 143.93412284210),
    (0.00000003981, 5.75449411958, 239.16259053450),
    (0.00000003249, 0.58789568678, 619.29035849450),
    (0.00000003114, 0.02831060137, 221.16340196420),
    (0.00000003555, 3.12207684735, 1048.33622992530),
    (0.00000003010, 1.91180343491, 93.53154666300),
    (0.00000003384, 1.81702854004, 443.86366626340),
    (0.00000003222, 2.37342117781, 429.51895218280),
    (0.00000003431, 5.92099840679, 570.74476203920),
    (0.00000003271, 2.04947945059, 806.72595883600),
    (0.00000003207, 5.44018976766, 402.21916848780),
    (0.00000003091, 0.10717557454, 3590.51688744200),
    (0.00000002951, 1.76365810296, 426.81063919710),
    (0.00000002958, 0.23653889192, 1354.43315884340),
    (0.00000002948, 4.59289832104, 426.38574255490),
    (0.00000003506, 5.43222584214, 84.93352695390),
    (0.00000002894, 5.69678330542, 1262.38608488870),
    (0.00000003682, 1.07122313007, 395.57870223900),
    (0.00000002983, 5.25093816048, 313.47110834980),
    (0.00000003117, 4.18767239237, 366.79444583570),
    (0.00000002873, 4.45472312727, 361.37781986430),
    (0.00000003521, 2.05528981993, 1261.63532536330),
    (0.00000003496, 1.87950759078, 439.12836384820),
    (0.00000003012, 0.64439385874, 263.02034806090),
    (0.00000002849, 1.12491777974, 262.05714021440),
    (0.00000002910, 2.76192171681, 541.53981451060),
    (0.00000003322, 6.08893948791, 108.72184851110),
    (0.00000003181, 1.01419299056, 418.00017116690),
    (0.00000002793, 0.38781777981, 211.86280683950),
    (0.00000003091, 2.18216748751, 306.83064210100),
    (0.00000003748, 3.89145855821, 220.93390730060),
    (0.00000002982, 1.99831689446, 117.91056905120),
    (0.00000002793, 1.25466684542, 214.73538403650),
    (0.00000003512, 1.50965040301, 885.43971066640),
    (0.00000002716, 0.80710391613, 757.21715453420),
    (0.00000003137, 2.09889265033, 2751.54759969160),
    (0.00000002738, 4.89270330923, 464.73122651380),
    (0.00000002875, 4.28436709414, 4010.00153131720),
    (0.00000003313, 3.01452486457, 336.83873878170),
    (0.00000002746, 2.69963506928, 380.38840039090),
    (0.00000003132, 2.19562786872, 2.96894541660),
    (0.00000003233, 0.60809684558, 3171.03224356680),
    (0.00000003034, 0.93246285284, 205.43478891180),
    (0.00000003006, 5.91067479448, 2.70831298570),
    (0.00000003643, 5.58302397259, 423.62924545940),
    (0.00000002625, 1.07042050691, 23.57587323610),
    (0.00000003495, 0.19887562030, 576.16138801060),
    (0.00000002590, 0.21252773750, 110.25450532920),
    (0.00000002704, 6.12908233599, 572.22923474750),
    (0.00000002568, 0.17571588314, 1056.20053645150),
    (0.00000002583, 2.96927378731, 384.05992122310),
    (0.00000002555, 3.96441052072, 430.79097657000),
    (0.00000002786, 2.54945911818, 195.89060769870),
    (0.00000002869, 4.82964665921, 710.74673161820),
    (0.00000002534, 5.31005598763, 427.34895040140),
    (0.00000002618, 1.22081401503, 36.64856292950),
    (0.00000003464, 2.32811328200, 285.37238101960),
    (0.00000003374, 3.34109586766, 162.09337010680),
    (0.00000002694, 4.64149271687, 140.96517742550),
    (0.00000002603, 0.99527295832, 92.30770638560),
    (0.00000003140, 5.40790277580, 328.24071907260),
    (0.00000002603, 4.31532790880, 561.93429400900),
    (0.00000002987, 0.82758128867, 45.57665103870),
    (0.00000002959, 3.35623851523, 273.85360000370),
    (0.00000002561, 0.54160683162, 107.75864066460),
    (0.00000002900, 1.20691455948, 462.02291352810),
    (0.00000002648, 1.90547819027, 88.11492069160),
    (0.00000002461, 4.68211868869, 2840.41327990860),
    (0.00000002534, 5.00311256556, 431.26405732200),
    (0.00000002521, 3.32160472310, 136.06981631590),
    (0.00000002945, 1.06452531856, 732.69511979410),
    (0.00000002654, 1.36744710395, 460.53844081980),
    (0.00000003297, 1.33975572602, 305.60680182360),
    (0.00000002634, 2.29995533800, 519.39602435610),
    (0.00000002805, 5.62255444533, 1699.27921650320),
    (0.00000002439, 5.14733660159, 303.86169668440),
    (0.00000002434, 3.71460437051, 4216.18707975440),
    (0.00000002416, 3.76296045457, 77.75054398390),
    (0.00000002803, 2.55280894914, 505.31194270640),
    (0.00000002592, 3.32836551071, 110.15813710960),
    (0.00000003074, 1.71462387764, 256.58812461630),
    (0.00000003295, 0.81766682522, 705.11765732570),
    (0.00000003183, 6.15742006608, 109.24311337290),
    (0.00000002908, 5.38534195293, 315.16802937920),
    (0.00000002326, 1.42604031905, 131.54696222180),
    (0.00000002427, 2.04627850740, 124.50285119020),
    (0.00000002632, 1.41253794767, 211.65456403530),
    (0.00000002297, 1.38016674676, 425.84743135060),
    (0.00000002318, 6.27716072818, 317.14262918200),
    (0.00000002310, 4.86442292404, 3259.89792378380),
    (0.00000002873, 1.10206537875, 7.86430652620),
    (0.00000002616, 0.11849676899, 133.10087089930),
    (0.00000003213, 4.49320461690, 432.22726516850),
    (0.00000002276, 6.04688191978, 214.10224459010),
    (0.00000002276, 1.96882478275, 212.49594628590),
    (0.00000002917, 0.96774661857, 100.38446123290),
    (0.00000002890, 5.72610904534, 322.02094394910),
    (0.00000002829, 2.66887892162, 141.48644228730),
    (0.00000002695, 1.47488571070, 42.53826965290),
    (0.00000002697, 5.34002228297, 432.01481684740),
    (0.00000002229, 4.40717937246, 540.73666535850),
    (0.00000002214, 2.43714413196, 426.85882330690),
    (0.00000002512, 4.68291916658, 1596.18644228460),
    (0.00000002202, 5.91122030007, 867.42347575360),
    (0.00000002856, 0.94736445171, 41.05379694460),
    (0.00000002396, 0.10516628717, 206.93630796260),
    (0.00000002345, 1.16685267780, 640.86049416050),
    (0.00000002263, 4.62327588198, 188.02630117250),
    (0.00000002214, 3.97566024178, 426.33755844510),
    (0.00000002274, 4.94055830720, 4002.88798431640),
    (0.00000002541, 0.83705615200, 12352.85260454480),
    (0.00000002145, 3.40120044084, 111.16952906590),
    (0.00000002895, 6.07389082608, 2914.01423582380),
    (0.00000002520, 1.05396310009, 184.72728735580),
    (0.00000002448, 3.49820841117, 481.73606947030),
    (0.00000002343, 2.86472924644, 207.07932031450),
    (0.00000002964, 5.96264929181, 465.95506679120),
    (0.00000002122, 4.04560058177, 118.07062774560),
    (0.00000002452, 4.35251210402, 1382.88734684660),
    (0.00000002131, 0.61211416273, 335.14181775230),
    (0.00000002116, 4.76181734842, 765.88461021250),
    (0.00000002245, 5.67078632283, 6467.92575796160),
    (0.00000002425, 0.84789834075, 550.13783421970),
    (0.00000002227, 1.15684015463, 227.31374111850),
    (0.00000002314, 6.13104971819, 2730.20695868920),
    (0.00000002344, 0.35844885568, 217.44369702220),
    (0.00000002529, 3.07975959821, 774.48262992160),
    (0.00000002523, 1.75026771081, 1578.02719501990),
    (0.00000002111, 4.24637589094, 96.87299909510),
    (0.00000002826, 1.01974994073, 87.31177153950),
    (0.00000002906, 3.75374302356, 428.08266358430),
    (0.00000002113, 2.19787343926, 449.23210812500),
    (0.00000002142, 1.19671359858, 209.15449385380),
    (0.00000002882, 2.59371585952, 39.61750834610),
    (0.00000002078, 2.87503604503, 14.01464568050),
    (0.00000002090, 1.99032225653, 441.57604440300),
    (0.00000002519, 2.99001165551, 745.27768239300),
    (0.00000002035, 5.37147785849, 1041.22268292450),
    (0.00000002054, 1.11817372961, 842.90144101350),
    (0.00000002023, 2.94559148702, 668.20846196530),
    (0.00000002529, 4.34280159004, 221.89711514710),
    (0.00000002554, 5.56906955622, 214.19286731530),
    (0.00000002712, 1.60469055827, 1050.99635880120),
    (0.00000002350, 3.36541706919, 220.20019411770),
    (0.00000002015, 2.60446576036, 315.64111013120),
    (0.00000002158, 1.64945261993, 219.66188291340),
    (0.00000002120, 2.93968038721, 304.12232911530),
    (0.00000002357, 1.94433441808, 233.90602325750),
    (0.00000002579, 4.54124062411, 484.70501488690),
    (0.00000002046, 5.45531068264, 200.55647414470),
    (0.00000002040, 2.04492641594, 1097.09427470170),
    (0.00000002675, 1.20234167733, 28.57180808220),
    (0.00000002528, 4.69268465973, 637.44960575920),
    (0.00000002314, 2.81193072994, 25.12978191360),
    (0.00000002689, 5.03868493349, 1269.49963188950),
    (0.00000002115, 3.10772296248, 1276.61317889030),
    (0.00000002712, 1.49710379127, 3340.61242669980),
    (0.00000002138, 4.52114042624, 378.90392768260),
    (0.00000002708, 0.01014338204, 389.94962794650),
    (0.00000002560, 5.75783882561, 544.50875992720),
    (0.00000002028, 0.24331359951, 146.59425171800),
    (0.00000002096, 1.44475430956, 864.24208201590),
    (0.00000001897, 4.63194412388, 220.30076785420),
    (0.00000001901, 1.78319572727, 192.85222631290),
    (0.00000002011, 4.11578325523, 315.87060479480),
    (0.00000002014, 2.26726355818, 198.10879358990),
    (0.00000001905, 2.15527255015, 326.68681039510),
    (0.00000001949, 3.95440811214, 103.61403908040),
    (0.00000002098, 5.24613314798, 175.42669223110),
    (0.00000001884, 5.66018186202, 1310.39337013970),
    (0.00000001911, 2.60665446600, 301.41401612960),
    (0.00000002160, 3.42888079793, 420.00590873700),
    (0.00000002325, 5.89632178100, 815.06334611420),
    (0.00000001914, 0.22451332248, 171.65459766240),
    (0.00000001854, 0.04278915026, 233.74596456310),
    (0.00000001973, 2.68640259480, 769.81676347560),
    (0.00000001941, 0.61369890353, 3487.42411322340),
    (0.00000001836, 3.41496980986, 195.77298761970),
    (0.00000002554, 2.35660179716, 212.40532356070),
    (0.00000001822, 4.05510232882, 639.94547042380),
    (0.00000001883, 6.27079329518, 16.67477455640),
    (0.00000001865, 0.17460226411, 244.79166482700),
    (0.00000002097, 4.58369520569, 316.91313451840),
    (0.00000001879, 2.76480572708, 28.45418800320),
    (0.00000002111, 2.92457831824, 328.92204262880),
    (0.00000002077, 0.35943033580, 589.49471013490),
    (0.00000001825, 4.04945265223, 190.40454575810),
    (0.00000001895, 3.89414880651, 334.55111692130),
    (0.00000002425, 3.76754213762, 25558.21217647960),
    (0.00000002218, 1.85341154236, 635.23141986800),
    (0.00000001782, 0.86927461254, 92.79783348010),
    (0.00000002432, 3.78026263567, 1254.52177836250),
    (0.00000002106, 0.17285594964, 354.26427286350),
    (0.00000001791, 6.23892012939, 1670.82502850000),
    (0.00000001996, 1.40940081042, 230.70758317730),
    (0.00000001753, 1.86660297451, 241.75328344120),
    (0.00000002093, 2.39366777880, 187.43560034150),
    (0.00000002007, 3.54083120293, 226.79247625670),
    (0.00000001949, 1.36533052698, 1385.17496870700),
    (0.00000001737, 2.67583588366, 6.36278747540),
    (0.00000001868, 4.24454204649, 1119.18567522950),
    (0.00000001896, 3.81474515719, 310.97524368520),
    (0.00000001860, 3.67887919389, 1321.43907040360),
    (0.00000002305, 3.53252557028, 1570.91364801910),
    (0.00000002008, 3.88504783546, 638.93407846750),
    (0.00000001928, 2.64393870433, 525.75881183150),
    (0.00000001807, 0.76057354967, 66.18357885820),
    (0.00000001824, 0.85822155861, 639.84910220420),
    (0.00000002221, 4.82210413830, 1585.89150154610),
    (0.00000002227, 4.58488941022, 271.61836777000),
    (0.00000001897, 0.64334758250, 55.65914345610),
    (0.00000001792, 0.00514800434, 827.92358748650),
    (0.00000001831, 3.69768852728, 172.45774681450),
    (0.00000001790, 4.80062977720, 3576.28979344040),
    (0.00000001698, 0.72475212282, 295.19424100610),
    (0.00000001744, 3.45256183290, 238.57188970350),
    (0.00000002334, 1.51845210531, 170.01006625970),
    (0.00000001669, 4.44620549295, 4319.27985397300),
    (0.00000001939, 3.43927826945, 102.57150935680),
    (0.00000001733, 5.96815907422, 837.69726336320),
    (0.00000001686, 2.12870436615, 491.55792945680),
    (0.00000001651, 3.20586624475, 281.17959532560),
    (0.00000001884, 4.24447812450, 13.49338081870),
    (0.00000001880, 0.33845094634, 214.94362684070),
    (0.00000001817, 3.07678560214, 220.52451702340),
    (0.00000001872, 3.79328892492, 392.65794093220),
    (0.00000002195, 1.93786776664, 259.76951835400),
    (0.00000001881, 4.49314034712, 199.80571461930),
    (0.00000001662, 0.29659841675, 314.90739694830),
    (0.00000001626, 2.29697402942, 3067.93946934820),
    (0.00000001927, 1.00706624515, 26.82670294300),
    (0.00000001621, 0.01495920679, 1379.70595310890),
    (0.00000001655, 4.15494230496, 4326.39340097380),
    (0.00000001719, 5.97443860990, 152.53214255120),
    (0.00000001653, 5.65633302949, 448.68959140380),
    (0.00000001790, 3.73709604091, 10.03430830760),
    (0.00000001600, 2.28430251221, 749.20983565610),
    (0.00000001770, 0.03256515992, 364.34676528090),
    (0.00000001939, 5.93191442558, 249.94765836750),
    (0.00000001988, 4.78810872536, 101.86893394120),
    (0.00000001667, 5.52149899431, 229.97386999440),
    (0.00000002215, 3.55121116323, 594.65070367540),
    (0.00000001950, 0.80878923373, 1049.08698945070),
    (0.00000001773, 2.55608046714, 9985.75935677140),
    (0.00000002088, 2.33165208016, 420.44785172170),
    (0.00000002107, 2.43624356568, 453.68552624990),
    (0.00000001907, 4.72569972805, 857.12853501510),
    (0.00000001609, 4.96540433043, 285.11174858870),
    (0.00000002152, 4.87024306306, 186.21176006410),
    (0.00000001685, 5.68609178354, 200.03520928290),
    (0.00000001752, 5.21532265401, 25448.00585526019),
    (0.00000001870, 6.14683645342, 347.36317418380),
    (0.00000001731, 1.95944272122, 934.94851496820),
    (0.00000001680, 5.56246697700, 170.97327410620),
    (0.00000001652, 1.24521351050, 398.14400287280),
    (0.00000001548, 0.38524522125, 17.26547538740),
    (0.00000001577, 0.23430114545, 434.67494572330),
    (0.00000001652, 2.84480428863, 385.54439393140),
    (0.00000001770, 1.15057996280, 199.96577331370),
    (0.00000001528, 4.02240583348, 236.19364511790),
    (0.00000002118, 5.47803429266, 369.08206769610),
    (0.00000001543, 2.54353574089, 632.73555520340),
    (0.00000001504, 5.94300855424, 280.21638747910),
    (0.00000001495, 2.19380669867, 407.47573576480),
    (0.00000001894, 1.88797605501, 598.84348936940),
    (0.00000001515, 4.70072295492, 211.29335786790),
    (0.00000001767, 3.11910667879, 2921.12778282460),
    (0.00000001515, 3.31498374761, 215.30483300810),
    (0.00000001728, 5.28095966912, 219.51887056150),
    (0.00000001906, 5.24236020775, 248.46318565920),
    (0.00000001607, 0.80041605735, 642.34496686880),
    (0.00000001640, 2.93387205029, 1364.72809958190),
    (0.00000001585, 0.77219822539, 661.23792731640),
    (0.00000001458, 5.67666822477, 632.83192342300),
    (0.00000001866, 4.40562835971, 971.10695080320),
    (0.00000001838, 0.48492190760, 1127.04998175570),
    (0.00000001903, 5.18692835916, 2015.67108615980),
    (0.00000001590, 2.80043208070, 633.74694715970),
    (0.00000001489, 4.10155671855, 77837.11123384659),
    (0.00000001573, 4.23741356107, 203.89792657680),
    (0.00000001690, 0.65475720351, 2700.71514038580),
    (0.00000001872, 3.54376036064, 354.52490529440),
    (0.00000001419, 4.53129346734, 224.60542813280),
    (0.00000001575, 3.52476647615, 373.90799283650),
    (0.00000001817, 3.95203885550, 6076.89030155420),
    (0.00000001446, 5.41423319377, 317.87634236490),
    (0.00000001552, 1.89030720529, 1304.92435454160),
    (0.00000001394, 1.86243646383, 913.75088631770),
    (0.00000001940, 4.36562864826, 432.74853003030),
    (0.00000001655, 1.31748248488, 25668.41849769900),
    (0.00000001438, 5.12958189872, 71.81265315070),
    (0.00000001929, 4.90721606846, 206.39799675830),
    (0.00000001533, 2.10965059985, 378.64329525170),
    (0.00000001421, 6.22897936063, 904.40210708320),
    (0.00000001450, 1.98065714692, 205.97310011610),
    (0.00000001584, 5.94110940455, 1226.21060271120),
    (0.00000001510, 3.77771207288, 222.70026429920),
    (0.00000001670, 2.51954641624, 976.73602509570),
    (0.00000001823, 1.60093991502, 1141.13406340540),
    (0.00000001564, 3.94804398924, 9566.27471289620),
    (0.00000001406, 3.65940442223, 316.50374424120),
    (0.00000001653, 3.62394476466, 968.13800538660),
    (0.00000001495, 0.77832279170, 5959.57043333400),
    (0.00000001408, 5.24970924980, 316.27999507200),
    (0.00000001724, 0.25483952164, 125.18417474640),
    (0.00000001426, 2.26871672572, 17.40848773930),
    (0.00000001881, 4.12588105003, 562.14674233010),
    (0.00000001370, 4.74474866880, 1357.61455258110),
    (0.00000001485, 2.18712736768, 9889.78012955360),
    (0.00000001369, 1.31846306523, 1160.83017300510),
    (0.00000001394, 5.66924517860, 1736.99156101570),
    (0.00000001375, 0.16983286236, 346.39996633730),
    (0.00000001525, 2.40244831911, 419.43645976540),
    (0.00000001359, 2.68668516027, 310.76279536410),
    (0.00000001396, 3.67055397940, 253.45912050530),
    (0.00000001454, 5.49356262440, 504.56118318100),
    (0.00000001813, 0.21882066860, 263.70167161710),
    (0.00000001330, 3.01736059716, 254.14044406150),
    (0.00000001498, 0.17578085903, 155.78297225810),
    (0.00000001509, 5.13129901759, 768.85355562910),
    (0.00000001550, 1.44225397189, 1894.41906467650),
    (0.00000001447, 1.44933809994, 893.35640681930),
    (0.00000001306, 5.76425101758, 714.67888488130),
    (0.00000001660, 1.34160526151, 322.61164478010),
    (0.00000001347, 3.00388920953, 843.63515419640),
    (0.00000001432, 3.43786149731, 251.17149864490),
    (0.00000001510, 4.39762427873, 25.27279426550),
    (0.00000001587, 5.17106904014, 141.69889060840),
    (0.00000001477, 5.47518377610, 226.04171673130),
    (0.00000001356, 4.24406292182, 332.17287233570),
    (0.00000001644, 1.74367211793, 67.88049988760),
    (0.00000001407, 5.79229630947, 188.16931352440),
    (0.00000001575, 0.09808372057, 702.14871190910),
    (0.00000001765, 4.93410889383, 201.51968199120),
    (0.00000001318, 4.91605557404, 17.52610781830),
    (0.00000001701, 4.47360878108, 384.27236954420),
    (0.00000001304, 6.04155032791, 25.86349509650),
    (0.00000001269, 4.91035989349, 354.99798604640),
    (0.00000001620, 5.54960841244, 260.36021918500),
    (0.00000001263, 1.16521999431, 255.83736509090),
    (0.00000001744, 3.70453251764, 147.11551657980),
    (0.00000001579, 4.31561365365, 2228.97018159780),
    (0.00000001557, 0.57740217353, 3178.14579056760),
    (0.00000001302, 0.32055726013, 119.76754877500),
    (0.00000001405, 3.20407486040, 395.10562148700),
    (0.00000001234, 2.34766954239, 318.67949151700),
    (0.00000001519, 4.74629629688, 100.17201291180),
    (0.00000001573, 4.00132484524, 1264.29545423920),
    (0.00000001222, 0.10709243166, 1372.59240610810),
    (0.00000001205, 0.24105241435, 466.75821594330),
    (0.00000001188, 1.27112537278, 1184.40604624120),
    (0.00000001280, 4.85454052139, 535.91074021810),
    (0.00000001482, 4.47166692910, 763.43692965770),
    (0.00000001233, 1.64803509193, 433.66355376700),
    (0.00000001476, 3.76634399110, 272.58157561650),
    (0.00000001199, 1.78020373551, 102.34201469320),
    (0.00000001186, 4.72162748523, 795.68025857210),
    (0.00000001291, 4.42697938285, 10220.39909321180),
    (0.00000001576, 2.40263038916, 348.63519857100),
    (0.00000001497, 3.44614317326, 3024.22055704320),
    (0.00000001175, 4.85145058205, 433.75992198660),
    (0.00000001262, 5.79416346069, 531.97858695500),
    (0.00000001486, 4.39599352105, 1055.44977692610),
    (0.00000001351, 0.46461977407, 707.56533788050),
    (0.00000001230, 5.18147817992, 752.39122939380),
    (0.00000001175, 4.35535063059, 3892.68166309700),
    (0.00000001581, 5.49361132323, 419.53282798500),
    (0.00000001247, 4.22328749428, 113.12708252620),
    (0.00000001145, 2.26067253357, 199.12018554620),
    (0.00000001385, 0.89711064123, 6073.70890781650),
    (0.00000001228, 4.55057016747, 680.05731138130),
    (0.00000001470, 1.58708185256, 409.18970313670),
    (0.00000001366, 3.99684537321, 6065.84460129030),
    (0.00000001131, 1.56474593118, 196.83676920270),
    (0.00000001163, 5.75528918663, 2303.60876781320),
    (0.00000001142, 4.35845106342, 1834.61531963620),
    (0.00000001244, 1.93187654929, 623.22251175760),
    (0.00000001136, 3.13253323524, 611.44309831080),
    (0.00000001425, 2.65840274172, 1253.77101883710),
    (0.00000001114, 3.43048279234, 771.30123618390),
    (0.00000001314, 0.15326588489, 493.30303459600),
    (0.00000001109, 2.95808402860, 1091.62525910360),
    (0.00000001177, 3.88159541809, 128.36556848410),
    (0.00000001150, 4.69140569690, 1.27202438720),
    (0.00000001527, 1.09983755253, 683.02625679790),
    (0.00000001304, 5.24544813643, 5650.29211067820),
    (0.00000001347, 4.11616699496, 97.46369992610),
    (0.00000001085, 0.70231952018, 1166.40685767090),
    (0.00000001224, 4.22994822530, 827.17282796110),
    (0.00000001142, 5.36157631813, 199.02381732660),
    (0.00000001373, 0.89371361814, 799.61241183520),
    (0.00000001085, 1.15969472512, 398.28701522470),
    (0.00000001098, 3.75659421786, 318.39760722670),
    (0.00000001136, 1.35127769399, 205.92491600630),
    (0.00000001108, 6.03201954623, 206.44618086810),
    (0.00000001146, 0.18236094571, 6386.16862421000),
    (0.00000001216, 0.49809632153, 1178.98942026980),
    (0.00000001295, 2.32056477953, 10003.91860403610),
    (0.00000001082, 1.96611069200, 3700.72320866140),
    (0.00000001094, 5.12244388591, 314.38613208650),
    (0.00000001464, 4.54056066665, 1248.14194454460),
    (0.00000001277, 5.42029902662, 9996.05429750990),
    (0.00000001248, 0.21625135029, 101.60830151030),
    (0.00000001055, 5.53725373260, 1578.77795454530),
    (0.00000001265, 5.85587479852, 82.85835341460),
    (0.00000001058, 0.73824266822, 670.91677495100),
    (0.00000001127, 3.63458498010, 582.38116313410),
    (0.00000001188, 2.10062104535, 423.88987789030),
    (0.00000001217, 2.49656109071, 311.72600321060),
    (0.00000001080, 3.96349373526, 118.87377689770),
    (0.00000001175, 0.91096377814, 740.06929922580),
    (0.00000001087, 5.46774426742, 494.47869076360),
    (0.00000001080, 3.49168860514, 847.04604259770),
    (0.00000001095, 0.97418295319, 1159.29331067010),
    (0.00000001078, 1.75579678521, 1457.52593306200),
    (0.00000001087, 4.81206824168, 109.68505635760),
    (0.00000001293, 0.02397468965, 2723.09341168840),
    (0.00000001190, 4.49552956868, 429.30650386170),
    (0.00000001127, 0.84707518843, 48.75804477640),
    (0.00000001047, 4.58416926615, 89.75945209430),
    (0.00000001251, 1.16783030789, 455.16999895820),
    (0.00000001122, 5.72161306640, 78263.70942472259),
    (0.00000001027, 0.16330222064, 229.76142167330),
    (0.00000001069, 2.37188773221, 848.53051530600),
    (0.00000001252, 5.28238896229, 6080.82245481730),
    (0.00000001181, 5.22299379363, 1459.95656727430),
    (0.00000001382, 0.51603096285, 774.00954916960),
    (0.00000001064, 5.95222326171, 1144.31545714310),
    (0.00000001083, 5.04862249728, 629.86297800640),
    (0.00000001061, 3.38604454777, 27.08733537390),
    (0.00000001415, 4.85796248007, 2332.06295581640),
    (0.00000001082, 4.07686503205, 1245.17299912800),
    (0.00000001112, 6.07617329506, 870.46185713940),
    (0.00000001072, 0.73647405514, 1482.79872732750),
    (0.00000001322, 2.81015928946, 223.33340374560),
    (0.00000001398, 1.55232715558, 25771.51127191760),
    (0.00000001065, 3.98884050015, 683.18631549230),
    (0.00000001008, 5.19594380826, 316.13123722570),
    (0.00000001197, 0.79148395839, 9580.50180689780),
    (0.00000001402, 4.82957073563, 883.79517926370),
    (0.00000001064, 4.65334775068, 201.99276274320),
    (0.00000001108, 5.88857586823, 657.16276170140),
    (0.00000000996, 4.99081076034, 426.75824957040),
    (0.00000000996, 1.60533807224, 426.43813218160),
    (0.00000001028, 5.92128319450, 108.50940019000),
    (0.00000001004, 3.54259597860, 754.03576079650),
    (0.00000001214, 0.81213286478, 1773.91780271860),
    (0.00000001318, 0.60269176130, 1123.11782849260),
    (0.00000001327, 4.75885008900, 321.80849562800),
    (0.00000001014, 5.79119811472, 6460.81221096080),
    (0.00000001178, 0.47169015111, 495.96316347190),
    (0.00000000999, 5.95030119388, 3906.90875709860),
    (0.00000001033, 3.75433174131, 414.81877742920),
    (0.00000001002, 1.39171012432, 1251.34038462480),
    (0.00000000990, 1.32621236288, 1268.74887236410),
    (0.00000001275, 1.95417923977, 757.80785536520),
    (0.00000001174, 6.04352585298, 225.07850888480),
    (0.00000001174, 5.43253033568, 849.26422848890),
    (0.00000001004, 5.33434806968, 46.20979048510),
    (0.00000001108, 1.28177889943, 294.30046912880),
    (0.00000000976, 1.83523959034, 5.88970672340),
    (0.00000000971, 3.38563950019, 306.09692891810),
    (0.00000001050, 3.88449467091, 632.26247445140),
    (0.00000001050, 3.26096036982, 159.71512552120),
    (0.00000001041, 2.36429894351, 821.54375366860),
    (0.00000001218, 4.61739999906, 990.22940591440),
    (0.00000001342, 1.55614528399, 498.93210888850),
    (0.00000000967, 3.84645372731, 604.47256366190),
    (0.00000001171, 0.42265751679, 10011.03215103690),
    (0.00000000965, 0.05396772193, 962.50893109410),
    (0.00000001096, 3.04685199735, 608.40471692500),
    (0.00000001166, 6.14999706886, 737.31280213030),
    (0.00000000986, 3.71830385737, 1235.61177157240),
    (0.00000000953, 0.79704964354, 16.46232623530),
    (0.00000000976, 1.05304205075, 8.33738727820),
    (0.00000001142, 1.06057209808, 369.97583957340),
    (0.00000001060, 4.36236322604, 633.30500417500),
    (0.00000001138, 4.31859245106, 98.42690777260),
    (0.00000001006, 5.89037944896, 10007.09999777380),
    (0.00000000967, 1.56852913547, 157.63995198190),
    (0.00000001082, 0.99548769517, 4.14460158420),
    (0.00000001009, 6.15037679495, 401.32539661050),
    (0.00000000981, 2.37620383333, 35.21227433100),
    (0.00000001011, 5.42685471402, 110.72758608120),
    (0.00000000989, 4.11575312649, 413.85556958270),
    (0.00000001024, 1.90798238649, 1175.80802653210),
    (0.00000001079, 4.95981991427, 631.82053146670),
    (0.00000000982, 3.02842195594, 347.41135829360),
    (0.00000000979, 3.74615289445, 700.45179087970),
    (0.00000000928, 5.22236951137, 1173.52040467170),
    (0.00000000912, 4.14451390992, 469.72716135990),
    (0.00000000938, 1.18273838991, 254.35289238260),
    (0.00000000977, 1.26684849112, 104.57724692690),
    (0.00000001134, 5.87478488618, 6058.73105428950),
    (0.00000001092, 4.51789158271, 532.13864564940),
    (0.00000001132, 4.55420027150, 1912.57831194120),
    (0.00000000915, 4.87266214195, 18.91000679010),
    (0.00000000915, 5.96624579967, 1987.21689815660),
    (0.00000001039, 2.40020830681, 6475.03930496240),
    (0.00000000965, 4.98927479154, 394.35486196160),
    (0.00000000964, 3.60903715900, 3281.23856478620),
    (0.00000000897, 2.81660605059, 316.23181096220),
    (0.00000001008, 5.78024010734, 502.86426215160),
    (0.00000001005, 6.12431717236, 6275.96230299060),
    (0.00000000895, 6.09245508513, 316.55192835100),
    (0.00000001224, 1.73535287415, 5120.60114558360),
    (0.00000001138, 2.92901543353, 1037.29052966140),
    (0.00000000924, 5.70601816488, 614.83694036960),
    (0.00000000893, 5.25155704274, 475.35623565240),
    (0.00000001042, 1.10027795842, 1518.22344997960),
    (0.00000000890, 4.03192782386, 1314.32552340280),
    (0.00000000926, 3.35110915055, 635.70450062000),
    (0.00000001130, 5.49282680494, 92.94084583200),
    (0.00000000890, 2.12933822393, 3384.33133900480),
    (0.00000000967, 5.86215202069, 13.33332212430),
    (0.00000001004, 1.73116475997, 10316.37832042960),
    (0.00000001226, 3.52834223937, 80.41067285980),
    (0.00000001029, 4.90620832171, 19.12245511120),
    (0.00000000996, 0.76740358631, 733.42883297700),
    (0.00000000910, 4.08904906301, 3333.49887969900),
    (0.00000001235, 1.23871819142, 357.23321828010),
    (0.00000001218, 0.18349810348, 1090.40141882620),
    (0.00000000864, 4.71917415767, 620.25356634100),
    (0.00000000935, 1.45887009044, 1042.91960395390),
    (0.00000000866, 4.04792682992, 522.52923398400),
    (0.00000001158, 5.43322209110, 1089.12939443900),
    (0.00000000860, 0.49220052417, 64.95973858080),
    (0.00000001190, 5.58965369650, 2810.92146160520),
    (0.00000000957, 3.12914047010, 628.59095361920),
    (0.00000000861, 5.69790389801, 103.84353374400),
    (0.00000001037, 5.91424823262, 11.30633269480),
    (0.00000000918, 0.21424702155, 373.01422095920),
    (0.00000000836, 3.02501867546, 387.24131496080),
    (0.00000001158, 3.33343863758, 6290.18939699220),
    (0.00000000856, 0.81593288669, 907.37105249980),
    (0.00000001036, 3.11936047271, 5429.87946823940),
    (0.00000000853, 6.23618175592, 938.88066823130),
    (0.00000000982, 3.39082880963, 521.61421024730),
    (0.00000000851, 5.14029961564, 802.79380557290),
    (0.00000000828, 0.28399876908, 338.48327018440),
    (0.00000000868, 1.89151676387, 627.15466502070),
    (0.00000000878, 2.67671626912, 688.65533109040),
    (0.00000000921, 0.18441593712, 3803.81598288000),
    (0.00000000821, 0.74694467095, 1152.17976366930),
    (0.00000000841, 2.42616504698, 625.88264063350),
    (0.00000000862, 3.35273419872, 425.32616648880),
    (0.00000000887, 3.46938383985, 1748.78802080500),
    (0.00000000815, 5.95428642326, 321.05773610260),
    (0.00000000958, 1.35525670354, 1201.83158032300),
    (0.00000000905, 5.43093361027, 236.87496867410),
    (0.00000000862, 3.24167644516, 427.87021526320),
    (0.00000000793, 5.01131700831, 109.99387289830),
    (0.00000000791, 2.21809404489, 110.41876954050),
    (0.00000000842, 5.04957483651, 444.12429869430),
    (0.00000000887, 4.23752031714, 3553.91152213780),
    (0.00000000851, 4.64229745145, 4105.98075853500),
    (0.00000001067, 4.69271921916, 559.69906177530),
    (0.00000000966, 4.55013458162, 9360.08916445900),
    (0.00000000977, 1.50925667031, 186.47239249500),
    (0.00000001092, 0.58153747940, 203.26478713040),
    (0.00000000997, 0.24589891452, 439.93151300030),
    (0.00000000786, 3.84829878956, 194.38908864790),
    (0.00000000774, 3.76050639310, 219.14061805160),
    (0.00000000845, 4.21602090805, 2648.45482547300),
    (0.00000000962, 0.30590569897, 229.34073054800),
    (0.00000000763, 0.05577842075, 846.13101886100),
    (0.00000000839, 5.68124142701, 2620.00063746980),
    (0.00000000818, 2.52609626540, 26301.20223701220),
    (0.00000000929, 0.71906225883, 740.28174754690),
    (0.00000000895, 5.83218231202, 4539.69249641180),
    (0.00000000939, 3.68460642343, 817.77165909990),
    (0.00000000755, 4.90024080821, 532.87235883230),
    (0.00000000784, 1.14096100609, 551.03160609700),
    (0.00000000899, 1.85252071775, 835.78789401270),
    (0.00000000753, 0.04254534997, 1534.73816584160),
    (0.00000001033, 1.00137993270, 134.11226285560),
    (0.00000000851, 6.12272864540, 1475.68518032670),
    (0.00000000797, 5.14322789256, 473.65931462300),
    (0.00000000729, 4.94931618796, 476.10699517780),
    (0.00000000852, 3.11058720799, 232.42155054920),
    (0.00000000783, 4.50805467439, 1151.42900414390),
    (0.00000000751, 0.92289775523, 1884.12412393800),
    (0.00000000832, 4.19686348297, 29.20494752860),
    (0.00000000720, 0.40961041030, 522.62560220360),
    (0.00000000722, 3.96121088528, 1474.93442080130),
    (0.00000000788, 0.99170388242, 121.84272231430),
    (0.00000000722, 4.16734185316, 232.20910222810),
    (0.00000000970, 2.32204039048, 566.60016045500),
    (0.00000000814, 5.19337022083, 948.21240112330),
    (0.00000000724, 2.30837674225, 949.12742486000),
    (0.00000000770, 5.89605163084, 156.67674413540),
    (0.00000000705, 5.40102118863, 1193.96727379680),
    (0.00000000809, 3.56474059969, 845.33207522580),
    (0.00000000755, 3.94580797273, 451.72797278960),
    (0.00000000731, 6.11847213487, 1239.54392483550),
    (0.00000000747, 1.40599730465, 782.34693644780),
    (0.00000000861, 1.84312374221, 984.60033162190),
    (0.00000000695, 4.78088165969, 10419.47109464820),
    (0.00000000804, 1.07998437400, 89.00869256890),
    (0.00000000828, 5.86080569334, 845.11962690470),
    (0.00000000692, 3.38736418117, 6489.26139842860),
    (0.00000000694, 3.07863807714, 316.60431797770),
    (0.00000000690, 5.86681311380, 316.17942133550),
    (0.00000000714, 5.38707933404, 567.82400073240),
    (0.00000000767, 0.12081849650, 485.88067105450),
    (0.00000000820, 1.87877245664, 499.89531673500),
    (0.00000000705, 0.57839934869, 1053.75285589670),
    (0.00000000684, 4.88442270630, 2545.36205125440),
    (0.00000000689, 6.14296395253, 622.48879857470),
    (0.00000000823, 3.50224755884, 877.57540414020),
    (0.00000000827, 2.59300433753, 232.94281541100),
    (0.00000000735, 3.05650026582, 66.91729204110),
)

R1 = (
    (0.06182981282, 0.25843515034, 213.29909543800),
    (0.00506577574, 0.71114650941, 206.18554843720),
    (0.00341394136, 5.79635773960, 426.59819087600),
    (0.00188491375, 0.47215719444, 220.41264243880),
    (0.00186261540, 3.14159265359, 0.00000000000),
    (0.00143891176, 1.40744864239, 7.11354700080),
    (0.00049621111, 6.01744469580, 103.09277421860),
    (0.00020928189, 5.09245654470, 639.89728631400),
    (0.00019952612, 1.17560125007, 419.48464387520),
    (0.00018839639, 1.60819563173, 110.20632121940),
    (0.00012892827, 5.94330258435, 433.71173787680),
    (0.00013876565, 0.75886204364, 199.07200143640),
    (0.00005396699, 1.28852405908, 14.22709400160),
    (0.00004869308, 0.86793894213, 323.50541665740),
    (0.00004247455, 0.39299384543, 227.52618943960),
    (0.00003252084, 1.25853470491, 95.97922721780),
    (0.00002856006, 2.16731405366, 735.87651353180),
    (0.00002909411, 4.60679154788, 202.25339517410),
    (0.00003081408, 3.43662557418, 522.57741809380),
    (0.00001987689, 2.45054204795, 412.37109687440),
    (0.00001941309, 6.02393385142, 209.36694217490),
    (0.00001581446, 1.29191789712, 210.11770170030),
    (0.00001339511, 4.30801821806, 853.19638175200),
    (0.00001315590, 1.25296446023, 117.31986822020),
    (0.00001203085, 1.86654673794, 316.39186965660),
    (0.00001091088, 0.07527246854, 216.48048917570),
    (0.00000954403, 5.15173410519, 647.01083331480),
    (0.00000966012, 0.47991379141, 632.78373931320),
    (0.00000881827, 1.88471724478, 1052.26838318840),
    (0.00000874215, 1.40224683864, 224.34479570190),
    (0.00000897512, 0.98343776092, 529.69096509460),
    (0.00000784866, 3.06377517461, 838.96928775040),
    (0.00000739892, 1.38225356694, 625.67019231240),
    (0.00000612961, 3.03307306767, 63.73589830340),
    (0.00000658210, 4.14362930980, 309.27832265580),
    (0.00000649600, 1.72489486160, 742.99006053260),
    (0.00000599236, 2.54924174765, 217.23124870110),
    (0.00000502886, 2.12958819475, 3.93215326310),
    (0.00000413017, 4.59334402271, 415.55249061210),
    (0.00000356117, 2.30312127651, 728.76296653100),
    (0.00000344777, 5.88787577835, 440.82528487760),
    (0.00000395004, 0.53349091102, 956.28915597060),
    (0.00000335526, 1.61614647174, 1368.66025284500),
    (0.00000362772, 4.70691652867, 302.16477565500),
    (0.00000321611, 0.97931764923, 3.18139373770),
    (0.00000277783, 0.26007031431, 195.13984817330),
    (0.00000291173, 2.83129427918, 1155.36115740700),
    (0.00000264971, 2.42670902733, 88.86568021700),
    (0.00000264864, 5.82860588985, 149.56319713460),
    (0.00000316777, 3.58395655749, 515.46387109300),
    (0.00000294324, 2.81632778983, 11.04570026390),
    (0.00000244864, 1.04493438899, 942.06206196900),
    (0.00000215368, 3.56535574833, 490.33408917940),
    (0.00000264047, 1.28547685567, 1059.38193018920),
    (0.00000246245, 0.90730313861, 191.95845443560),
    (0.00000222077, 5.13193212050, 269.92144674060),
    (0.00000194973, 4.56665009915, 846.08283475120),
    (0.00000182802, 2.67913220473, 127.47179660680),
    (0.00000181645, 4.93431600689, 74.78159856730),
    (0.00000174651, 3.44560172182, 137.03302416240),
    (0.00000165515, 5.99775895715, 536.80451209540),
    (0.00000154809, 1.19720845085, 265.98929347750),
    (0.00000169743, 4.63464467495, 284.14854074220),
    (0.00000151526, 0.52928231044, 330.61896365820),
    (0.00000152461, 5.43886711695, 422.66603761290),
    (0.00000157687, 2.99559914619, 340.77089204480),
    (0.00000140630, 2.02069760726, 1045.15483618760),
    (0.00000139834, 1.35282959390, 1685.05212250160),
    (0.00000140977, 1.27099900689, 203.00415469950),
    (0.00000136013, 5.01678984678, 351.81659230870),
    (0.00000153391, 0.26968607873, 1272.68102562720),
    (0.00000129476, 1.14344730612, 21.34064100240),
    (0.00000127831, 2.53876158952, 1471.75302706360),
    (0.00000126538, 3.00310970076, 277.03499374140),
    (0.00000100277, 3.61360169153, 1066.49547719000),
    (0.00000103169, 0.38175114761, 203.73786788240),
    (0.00000107527, 4.31870663477, 210.85141488320),
    (0.00000095934, 0.79463744168, 1258.45393162560),
    (0.00000082663, 0.28181414606, 234.63973644040),
    (0.00000097986, 2.56085956186, 191.20769491020),
    (0.00000097389, 3.26245865063, 831.85574074960),
    (0.00000072227, 4.37984630380, 860.30992875280),
    (0.00000070639, 0.73191513920, 437.64389113990),
    (0.00000070447, 0.87698401733, 423.41679713830),
    (0.00000072057, 5.58013290518, 429.77958461370),
    (0.00000073332, 0.62505906432, 1375.77379984580),
    (0.00000066433, 2.68414462465, 405.25754987360),
    (0.00000063812, 1.75051498180, 1361.54670584420),
    (0.00000061601, 1.09332288242, 2001.44399215820),
    (0.00000067006, 0.06872766216, 408.43894361130),
    (0.00000068945, 2.47127505057, 949.17560896980),
    (0.00000060456, 2.25094790113, 1788.14489672020),
    (0.00000067074, 5.45365870159, 200.76892246580),
    (0.00000065579, 0.05539079332, 1589.07289528380),
    (0.00000049320, 4.17243429807, 138.51749687070),
    (0.00000050648, 6.26867505289, 223.59403617650),
    (0.00000055166, 4.59491533823, 628.85158605010),
    (0.00000047916, 0.83929741626, 10.29494073850),
    (0.00000046691, 2.17322569098, 312.19908396260),
    (0.00000054179, 0.28360076018, 124.43341522100),
    (0.00000049511, 3.79960349195, 215.74677599280),
    (0.00000040136, 5.18161452756, 1478.86657406440),
    (0.00000039302, 0.56257369109, 1574.84580128220),
    (0.00000034962, 4.68487505703, 38.13303563780),
    (0.00000042770, 2.98582069454, 1148.24761040620),
    (0.00000036521, 0.63453270366, 52.69019803950),
    (0.00000039752, 0.28412706854, 131.40394986990),
    (0.00000031777, 5.19036499973, 76.26607127560),
    (0.00000033041, 1.97964846430, 142.44965013380),
    (0.00000042053, 4.83017951800, 288.08069400530),
    (0.00000030757, 1.47903923433, 1677.93857550080),
    (0.00000042829, 3.38225543528, 208.63322899200),
    (0.00000029245, 5.09869866956, 654.12438031560),
    (0.00000029165, 4.95664881649, 1795.25844372100),
    (0.00000029136, 2.74747553685, 404.50679034820),
    (0.00000032689, 6.12099521344, 145.63104387150),
    (0.00000028008, 0.83185907283, 2317.83586181480),
    (0.00000027725, 2.24364073545, 430.53034413910),
    (0.00000029939, 1.96415498448, 2104.53676637680),
    (0.00000032982, 3.28236160491, 222.86032299360),
    (0.00000031772, 6.02453027348, 1905.46476494040),
    (0.00000026959, 5.24308283338, 388.46515523820),
    (0.00000026514, 0.99638302878, 107.02492748170),
    (0.00000025421, 2.87336642463, 703.63318461740),
    (0.00000024908, 1.07713811775, 99.91138048090),
    (0.00000024955, 6.23974037842, 106.27416795630),
    (0.00000024894, 0.81040976807, 312.45971639350),
    (0.00000024340, 0.54867402916, 214.26230328450),
    (0.00000028441, 0.82630052794, 1692.16566950240),
    (0.00000023219, 5.07995629354, 479.28838891550),
    (0.00000024362, 3.10643455533, 212.33588759150),
    (0.00000021951, 6.06688237952, 85.82729883120),
    (0.00000022046, 3.89863665506, 563.63121503840),
    (0.00000022596, 4.86725457223, 295.05122865420),
    (0.00000021256, 5.10797617452, 333.65734504400),
    (0.00000025985, 2.20813879137, 1265.56747862640),
    (0.00000020904, 3.28855303434, 70.84944530420),
    (0.00000021505, 3.79541155976, 347.88443904560),
    (0.00000022067, 4.22716352578, 217.96496188400),
    (0.00000020629, 1.68732248608, 231.45834270270),
    (0.00000021429, 3.08914428467, 554.06998748280),
    (0.00000021310, 0.38868340861, 319.57326339430),
    (0.00000020521, 2.45651851283, 18.15924726470),
    (0.00000026055, 4.27554951169, 483.22054217860),
    (0.00000020703, 5.12057936320, 362.86229257260),
    (0.00000022047, 5.51249354809, 343.21857259960),
    (0.00000019443, 2.02441679295, 313.21047591890),
    (0.00000020163, 5.08481373110, 750.10360753340),
    (0.00000020125, 3.42997916125, 213.34727954780),
    (0.00000024196, 0.64787472796, 207.88246946660),
    (0.00000021977, 0.72894956852, 99.16062095550),
    (0.00000021120, 2.69286728009, 1464.63948006280),
    (0.00000017192, 4.71525117969, 2111.65031337760),
    (0.00000018540, 0.04817255506, 245.54242435240),
    (0.00000017521, 3.83662880684, 497.44763618020),
    (0.00000016107, 4.22374822303, 565.11568774670),
    (0.00000021607, 4.16647257628, 2.44768055480),
    (0.00000015979, 0.27376396113, 225.82926841020),
    (0.00000016831, 1.41134653939, 114.13847448250),
    (0.00000015626, 2.82768623405, 81.75213321620),
    (0.00000015499, 1.20606390539, 1994.33044515740),
    (0.00000015168, 3.84591816174, 1162.47470440780),
    (0.00000016436, 3.04752365976, 134.58534360760),
    (0.00000015870, 0.33026420429, 1891.23767093880),
    (0.00000020370, 0.23170286692, 213.25091132820),
    (0.00000016291, 1.70643197929, 2420.92863603340),
    (0.00000016280, 4.94159427320, 357.44566660120),
    (0.00000018076, 5.69515344123, 56.62235130260),
    (0.00000013724, 0.57240190030, 2634.22773147140),
    (0.00000017355, 3.55311137444, 218.92816973050),
    (0.00000013740, 5.70545527289, 92.04707395470),
    (0.00000015328, 1.31338692850, 216.21985674480),
    (0.00000012538, 5.19222019427, 635.96513305090),
    (0.00000012815, 1.60151130870, 320.32402291970),
    (0.00000013043, 0.45068441373, 1169.58825140860),
    (0.00000011984, 5.94916123570, 543.91805909620),
    (0.00000011753, 2.80279347133, 217.49188113200),
    (0.00000014746, 5.56520105813, 344.70304530790),
    (0.00000012762, 1.63557330778, 273.10284047830),
    (0.00000011855, 2.46234840263, 721.64941953020),
    (0.00000013309, 5.75641013916, 2221.85663459700),
    (0.00000014471, 0.45316163629, 2008.55753915900),
    (0.00000011840, 1.75720772380, 160.60889739850),
    (0.00000012374, 1.01456317602, 329.72519178090),
    (0.00000010747, 1.58065203003, 212.77783057620),
    (0.00000012758, 1.91952373240, 1581.95934828300),
    (0.00000011944, 4.44720922423, 32.24332891440),
    (0.00000011865, 5.10696147162, 4.66586644600),
    (0.00000011861, 4.30847607078, 618.55664531160),
    (0.00000010036, 0.48709852137, 305.34616939270),
    (0.00000012777, 3.74412991331, 508.35032409220),
    (0.00000010677, 0.76645916273, 218.71572140940),
    (0.00000011351, 3.00009819697, 198.32124191100),
    (0.00000010249, 2.40923650192, 546.95644048200),
    (0.00000009984, 2.63882014753, 416.30325013750),
    (0.00000009345, 5.45917317860, 414.06801790380),
    (0.00000009317, 4.46380159546, 2428.04218303420),
    (0.00000009928, 4.04821559448, 62.25142559510),
    (0.00000012767, 3.43273835457, 258.87574647670),
    (0.00000009733, 1.61066324680, 327.43756992050),
    (0.00000011163, 2.40665325234, 1781.03134971940),
    (0.00000010608, 2.07480020830, 213.82036029980),
    (0.00000009125, 2.92369523159, 1279.79457262800),
    (0.00000009525, 1.10338403136, 113.38771495710),
    (0.00000009805, 3.28427768485, 275.55052103310),
    (0.00000011263, 1.89402915826, 561.18353448360),
    (0.00000008572, 2.17858055966, 425.11371816770),
    (0.00000008577, 1.95484887975, 35.42472265210),
    (0.00000010157, 0.09037368733, 182.27960680100),
    (0.00000011807, 3.71278037583, 350.33211960040),
    (0.00000008595, 1.83382454431, 629.60234557550),
    (0.00000008396, 3.76782674303, 251.43213107580),
    (0.00000008460, 0.35676476459, 617.80588578620),
    (0.00000008250, 5.31140994372, 65.22037101170),
    (0.00000008342, 1.38307663880, 1.48447270830),
    (0.00000007987, 5.13622898170, 22.09140052780),
    (0.00000008377, 0.91817077859, 1485.98012106520),
    (0.00000007980, 0.94199750915, 2310.72231481400),
    (0.00000008898, 0.54037636841, 168.05251279940),
    (0.00000008233, 3.45785310349, 424.15051032120),
    (0.00000008034, 3.38451795597, 144.14657116320),
    (0.00000007871, 5.14041888473, 358.93013930950),
    (0.00000008868, 6.13541788772, 621.73803904930),
    (0.00000007523, 5.75475671698, 447.93883187840),
    (0.00000007515, 2.18967849979, 264.50482076920),
    (0.00000008083, 1.42661116937, 2737.32050569000),
    (0.00000008199, 0.96419579079, 767.36908292080),
    (0.00000008232, 0.35471613534, 278.51946644970),
    (0.00000008226, 5.44467204721, 254.94359321360),
    (0.00000006779, 1.19567671732, 5.41662597140),
    (0.00000008928, 4.88240256153, 120.35824960600),
    (0.00000007845, 4.56376829397, 280.96714700450),
    (0.00000006566, 3.50152072308, 9.56122755560),
    (0.00000006398, 0.33471834269, 2950.61960112800),
    (0.00000006881, 3.39438820076, 98.89998852460),
    (0.00000007418, 4.52451404934, 5.62907429250),
    (0.00000008021, 0.94470052446, 636.71589257630),
    (0.00000006134, 0.18013315689, 2207.62954059540),
    (0.00000007153, 3.85218295688, 214.04985496340),
    (0.00000006046, 4.66733263196, 543.02428721890),
    (0.00000006365, 2.12000811873, 274.06604832480),
    (0.00000006481, 5.31032923608, 6076.89030155420),
    (0.00000005935, 6.16808119163, 650.94298657790),
    (0.00000005752, 3.55773840903, 1073.60902419080),
    (0.00000006438, 0.44934410249, 10007.09999777380),
    (0.00000006283, 3.20942251433, 219.44943459230),
    (0.00000005542, 3.61193204407, 125.98732389850),
    (0.00000005522, 3.84217355164, 181.05576652360),
    (0.00000005777, 3.00590926498, 121.25202148330),
    (0.00000006670, 1.65236689367, 1898.35121793960),
    (0.00000007591, 0.10483002359, 2324.94940881560),
    (0.00000005881, 1.04006410206, 9992.87290377220),
    (0.00000005609, 4.83142709229, 643.07868005170),
    (0.00000005569, 2.23863483508, 1038.04128918680),
    (0.00000005755, 5.91598458372, 6062.66320755260),
    (0.00000005845, 6.10234689502, 209.10630974400),
    (0.00000005577, 0.81426649853, 472.17484191470),
    (0.00000005247, 0.56496127013, 192.69216761850),
    (0.00000005493, 5.81071309534, 237.67811782620),
    (0.00000005148, 4.85160826999, 267.47376618580),
    (0.00000006122, 2.11480301005, 2097.42321937600),
    (0.00000006188, 4.59441762166, 207.67002114550),
    (0.00000006303, 0.75806431119, 210.37833413120),
    (0.00000005102, 4.01017179605, 205.22234059070),
    (0.00000006583, 1.79054357427, 12.53017297220),
    (0.00000004902, 0.85099521860, 247.23934538180),
    (0.00000004918, 4.03512681632, 487.36514376280),
    (0.00000005818, 5.48495503489, 2538.24850425360),
    (0.00000004855, 4.18197778083, 2744.43405269080),
    (0.00000004885, 0.25103933716, 129.91947716160),
    (0.00000005748, 0.55968589618, 116.42609634290),
    (0.00000004901, 4.48628916012, 291.26208774300),
    (0.00000004720, 5.57686152365, 342.25536475310),
    (0.00000005962, 5.12885837444, 692.58748435350),
    (0.00000005629, 4.39847572369, 196.62432088160),
    (0.00000005596, 0.94874135403, 1802.37199072180),
    (0.00000006197, 3.80364010966, 339.28641933650),
    (0.00000004668, 3.16816375033, 148.07872442630),
    (0.00000004891, 2.67234862638, 417.03696332040),
    (0.00000004959, 1.63453587065, 166.82867252200),
    (0.00000004408, 4.95179678525, 184.09414790940),
    (0.00000004449, 5.69134789394, 252.65597135320),
    (0.00000004943, 0.85358212806, 46.47042291600),
    (0.00000005153, 3.82176885491, 842.15068148810),
    (0.00000005930, 5.95484153666, 486.40193591630),
    (0.00000004206, 2.97664198894, 380.12776796000),
    (0.00000004467, 0.24914978400, 128.95626931510),
    (0.00000005419, 6.19106890918, 337.73251065900),
    (0.00000004499, 4.71434958315, 151.04766984290),
    (0.00000004233, 4.18702525973, 685.47393735270),
    (0.00000004695, 1.54881559549, 214.78356814630),
    (0.00000004084, 4.87173226400, 14.97785352700),
    (0.00000004321, 5.42615168860, 436.89313161450),
    (0.00000005145, 0.49931857511, 248.72381809010),
    (0.00000003897, 0.74661138504, 2627.11418447060),
    (0.00000003995, 3.07750371135, 710.74673161820),
    (0.00000004089, 5.81996977038, 491.81856188770),
    (0.00000004532, 3.67494714028, 189.72322220190),
    (0.00000003690, 1.26565281569, 211.81462272970),
    (0.00000004036, 1.15473702593, 3053.71237534660),
    (0.00000003672, 4.52661018437, 488.84961647110),
    (0.00000003662, 2.87243745783, 411.62033734900),
    (0.00000003653, 3.06205147988, 409.92341631960),
    (0.00000003908, 3.45947158106, 220.46082654860),
    (0.00000004989, 3.36376245705, 824.74219374880),
    (0.00000003677, 3.55713278092, 244.31858407500),
    (0.00000003580, 1.57825591891, 643.82943957710),
    (0.00000003546, 2.19846245030, 135.33610313300),
    (0.00000003560, 4.51362022045, 601.76425067620),
    (0.00000003843, 0.98567531677, 271.40591944890),
    (0.00000003559, 1.11005765159, 6283.07584999140),
    (0.00000004266, 6.19696005871, 268.43697403230),
    (0.00000003442, 4.27628882392, 867.42347575360),
    (0.00000004844, 3.73706907228, 235.39049596580),
    (0.00000003659, 2.21859531609, 2.92076130680),
    (0.00000003958, 5.17084570945, 114.39910691340),
    (0.00000003609, 5.54387488088, 458.84151979040),
    (0.00000004470, 3.74256930900, 699.70103135430),
    (0.00000003293, 4.48068043469, 289.56516671360),
    (0.00000003240, 5.94728881707, 131.54696222180),
    (0.00000003477, 3.54553285172, 963.40270297140),
    (0.00000003838, 4.77967877681, 175.16605980020),
    (0.00000003223, 1.95410765469, 212.02707105080),
    (0.00000004053, 4.19011281964, 501.37978944330),
    (0.00000003100, 2.11956558345, 916.93228005540),
    (0.00000003183, 1.93201605379, 1354.43315884340),
    (0.00000003301, 1.80825506815, 756.32338265690),
    (0.00000004187, 5.96622666047, 212.54833591260),
    (0.00000003716, 3.70660462807, 204.70107572890),
    (0.00000003000, 6.15443664698, 3267.01147078460),
    (0.00000002993, 4.20888489881, 533.62311835770),
    (0.00000004125, 6.09715151219, 2641.34127847220),
    (0.00000003145, 2.55483540896, 905.88657979150),
    (0.00000002982, 1.52760656472, 945.99421523210),
    (0.00000003015, 1.76012152992, 28.31117565130),
    (0.00000003453, 1.42473508236, 2214.74308759620),
    (0.00000002926, 5.50138147476, 24.37902238820),
    (0.00000002978, 4.27440059910, 195.89060769870),
    (0.00000003526, 3.63935401565, 229.97386999440),
    (0.00000002860, 4.52551886503, 241.61027108930),
    (0.00000003059, 5.68165832697, 282.66406803390),
    (0.00000003415, 5.26311934884, 67.66805156650),
    (0.00000002819, 5.42053027567, 305.08553696180),
    (0.00000003503, 1.31670335802, 69.15252427480),
    (0.00000002746, 0.82597971627, 444.75743814070),
    (0.00000002796, 0.07021047160, 681.54178408960),
    (0.00000003366, 4.03843228994, 6.15033915430),
    (0.00000003242, 2.63461047831, 739.80866679490),
    (0.00000002718, 3.40899287465, 188.92007304980),
    (0.00000002741, 3.22092213412, 776.93031047640),
    (0.00000002793, 3.39766347322, 431.26405732200),
    (0.00000002966, 3.91429372950, 526.50957135690),
    (0.00000002693, 3.38996413068, 778.41478318470),
    (0.00000002680, 3.82192393959, 3060.82592234740),
    (0.00000002954, 2.69669880207, 426.64637498580),
    (0.00000002681, 1.04615621583, 28.45418800320),
    (0.00000003182, 2.72333374876, 432.22726516850),
    (0.00000002633, 2.55029306465, 10213.28554621100),
    (0.00000002923, 0.85695094024, 2435.15573003500),
    (0.00000002596, 5.42890752137, 207.14875628370),
    (0.00000003225, 0.96538615730, 2118.76386037840),
    (0.00000002774, 0.33260844270, 326.68681039510),
    (0.00000002550, 5.88893697427, 439.12836384820),
    (0.00000002716, 3.15505406487, 170.76082578510),
    (0.00000002942, 4.88555233562, 397.39324334740),
    (0.00000003121, 1.87815629157, 2413.81508903260),
    (0.00000003263, 2.59868619716, 213.03846300710),
    (0.00000002518, 0.15471130491, 945.24345570670),
    (0.00000003169, 5.70993651497, 381.35160823740),
    (0.00000002515, 0.06248441393, 427.56139872250),
    (0.00000003279, 4.95751323467, 313.94418910180),
    (0.00000002595, 5.13169797457, 299.12639426920),
    (0.00000002572, 3.42558391509, 4.19278569400),
    (0.00000002580, 2.03280916494, 319.31263096340),
    (0.00000003294, 6.24566168486, 421.18156490460),
    (0.00000002580, 2.62721090534, 213.18722085340),
    (0.00000002879, 0.45679876898, 285.63301345050),
    (0.00000002406, 4.57473098758, 228.27694896500),
    (0.00000002518, 2.55500085830, 140.00196957900),
    (0.00000002422, 2.36310658303, 84.34282612290),
    (0.00000002374, 2.25544718932, 17.26547538740),
    (0.00000002627, 1.26370339212, 724.83081326790),
    (0.00000002346, 3.77641630157, 206.23373254700),
    (0.00000002463, 5.42094278240, 395.57870223900),
    (0.00000002352, 0.63041319237, 210.59078245230),
    (0.00000003166, 0.26273580642, 201.51968199120),
    (0.00000002405, 0.78919759458, 426.07692601420),
    (0.00000002390, 5.89523812458, 738.79727483860),
    (0.00000002515, 0.70044371265, 2943.50605412720),
    (0.00000002332, 4.06963624306, 519.39602435610),
    (0.00000003132, 2.79331632190, 732.69511979410),
    (0.00000002658, 3.34020209714, 1141.13406340540),
    (0.00000002258, 0.12403309730, 2524.02141025200),
    (0.00000002697, 2.58404587754, 425.63498302950),
    (0.00000002416, 3.85003724506, 696.51963761660),
    (0.00000002597, 2.54164936697, 436.15941843160),
    (0.00000002192, 3.07202313269, 203.26478713040),
    (0.00000002424, 2.60715310452, 511.53171782990),
    (0.00000002126, 0.14811901148, 405.99126305650),
    (0.00000002306, 1.25068142377, 427.11945573780),
    (0.00000002121, 0.43505808954, 184.98791978670),
    (0.00000002755, 3.02380019321, 468.24268865160),
    (0.00000002333, 3.02634928771, 216.00740842370),
    (0.00000002182, 4.27912012069, 7.16173111060),
    (0.00000002101, 4.31781498012, 572.22923474750),
    (0.00000002362, 4.82914341110, 556.51766803760),
    (0.00000002218, 0.82936075453, 3370.10424500320),
    (0.00000002103, 5.25950154713, 661.23792731640),
    (0.00000002580, 1.03705340380, 213.41097002260),
    (0.00000002366, 6.14368355608, 205.43478891180),
    (0.00000002042, 0.21462094901, 3259.89792378380),
    (0.00000002547, 4.69969204009, 221.37585028530),
    (0.00000001987, 3.22670561632, 1382.88734684660),
    (0.00000002213, 0.89932827487, 286.59622129700),
    (0.00000002191, 0.08759174058, 259.76951835400),
    (0.00000001968, 0.57824086026, 180.16199464630),
    (0.00000002037, 2.35713099759, 610.69233878540),
    (0.00000001959, 2.18553775379, 72.07328558160),
    (0.00000002061, 1.68041202479, 1670.82502850000),
    (0.00000001940, 0.62951066481, 406.95447090300),
    (0.00000002043, 4.39130144045, 576.16138801060),
    (0.00000001936, 1.05286934530, 1262.38608488870),
    (0.00000001975, 0.31945835160, 938.12990870590),
    (0.00000002015, 1.66410213484, 193.65537546500),
    (0.00000001971, 0.72639439054, 200.55647414470),
    (0.00000001952, 6.25320630177, 241.75328344120),
    (0.00000001976, 1.31263772699, 135.54855145410),
    (0.00000002448, 0.52850194172, 429.51895218280),
    (0.00000001977, 3.13944703383, 421.93232443000),
    (0.00000001853, 0.17184530353, 196.03362005060),
    (0.00000002552, 5.39764879348, 2854.64037391020),
    (0.00000001830, 1.47821899466, 638.41281360570),
    (0.00000002245, 6.00427164270, 230.70758317730),
    (0.00000001822, 6.08626100417, 1261.63532536330),
    (0.00000002168, 0.41741136149, 213.51154375910),
    (0.00000001869, 3.67791368036, 403.02231763990),
    (0.00000001866, 1.59662677545, 391.17346822390),
    (0.00000002034, 1.21814866092, 3046.59882834580),
    (0.00000001929, 4.93193335031, 420.96911658350),
    (0.00000001746, 5.09757251683, 107.75864066460),
    (0.00000002168, 3.24685294764, 213.08664711690),
    (0.00000002178, 5.09777299346, 558.00214074590),
    (0.00000001992, 2.29524873043, 1773.91780271860),
    (0.00000001761, 2.88655624670, 141.69889060840),
    (0.00000001769, 5.47051542758, 206.13736432740),
    (0.00000001734, 2.11941015901, 430.79097657000),
    (0.00000002377, 1.07633521570, 59.80374504030),
    (0.00000001797, 2.90984583978, 92.79783348010),
    (0.00000001725, 5.22827286197, 757.21715453420),
    (0.00000002305, 5.88235807192, 426.55000676620),
    (0.00000001751, 5.28990803470, 87.31177153950),
    (0.00000002202, 1.28096946505, 624.91943278700),
    (0.00000002043, 0.46193065602, 831.10498122420),
    (0.00000001931, 1.26974971942, 219.89137757700),
    (0.00000001953, 2.96900002385, 398.14400287280),
    (0.00000001676, 4.81683149512, 181.80652604900),
    (0.00000001902, 2.74426125465, 4952.06359328620),
    (0.00000002133, 5.37177705284, 627.36711334180),
    (0.00000001962, 3.52111949662, 213.45915413240),
    (0.00000001709, 6.14073761844, 952.35700270750),
    (0.00000001784, 1.05243716682, 353.30106501700),
    (0.00000001700, 1.17418864170, 739.05790726950),
    (0.00000001609, 1.35009554392, 84.93352695390),
    (0.00000002038, 2.47570829812, 26.82670294300),
    (0.00000001870, 5.61729116529, 2957.73314812880),
    (0.00000001962, 0.13564680851, 213.13903674360),
    (0.00000002041, 3.31354526279, 1596.18644228460),
    (0.00000001612, 6.19495100885, 432.01481684740),
    (0.00000001742, 2.87947098602, 179.35884549420),
    (0.00000001964, 2.84253666387, 429.04587143080),
    (0.00000001805, 0.60932632638, 532.61172640140),
    (0.00000001647, 0.82347900016, 214.57111982520),
    (0.00000001893, 4.33962647901, 173.94221952280),
    (0.00000001689, 1.13037158144, 586.31331639720),
    (0.00000001523, 2.71561930244, 73.29712585900),
    (0.00000001524, 5.26558677448, 5429.87946823940),
    (0.00000001582, 2.79533721474, 842.90144101350),
    (0.00000001608, 2.33230359324, 418.52143602870),
    (0.00000001579, 1.15182102801, 731.94436026870),
    (0.00000001689, 1.91915438546, 630.33605875840),
    (0.00000001990, 5.23790221176, 550.13783421970),
    (0.00000001772, 2.95372411478, 172.24529849340),
    (0.00000001596, 0.99004701777, 953.10776223290),
    (0.00000001784, 3.91391032360, 159.12442469020),
    (0.00000001592, 2.99690086808, 45.57665103870),
    (0.00000001968, 0.23073879009, 220.36445832900),
    (0.00000001549, 5.88699595922, 60.55450456570),
    (0.00000001459, 5.51999778036, 273.85360000370),
    (0.00000001909, 2.78415262815, 418.00017116690),
    (0.00000001445, 3.25530914937, 453.42489381900),
    (0.00000001454, 0.16250693313, 115.62294719080),
    (0.00000001566, 2.24077018103, 1056.20053645150),
    (0.00000001412, 3.45442909885, 354.99798604640),
    (0.00000001564, 3.38591337689, 409.18970313670),
    (0.00000001631, 1.06286709889, 213.55972786890),
    (0.00000001415, 1.32091877590, 373.90799283650),
    (0.00000001389, 0.40584159469, 9360.08916445900),
    (0.00000001663, 2.33357114562, 188.02630117250),
    (0.00000001426, 5.44677783737, 864.24208201590),
    (0.00000001716, 3.96056093028, 1699.27921650320),
    (0.00000001682, 0.39747670320, 17.40848773930),
    (0.00000001368, 5.83289186692, 569.04784100980),
    (0.00000001416, 3.65464640816, 6.85291456990),
    (0.00000001469, 3.49069193830, 934.94851496820),
    (0.00000001330, 4.41794310534, 3914.02230409940),
    (0.00000001309, 1.29979865382, 428.08266358430),
    (0.00000001300, 1.57748627871, 238.57188970350),
    (0.00000001389, 1.31202796503, 6275.96230299060),
    (0.00000001384, 0.67585082323, 2751.54759969160),
    (0.00000001471, 1.21149871903, 2531.13495725280),
    (0.00000001334, 4.11154515525, 206.93630796260),
    (0.00000001601, 0.93356520728, 355.74874557180),
    (0.00000001259, 2.56678207309, 850.01498801430),
    (0.00000001277, 0.41764451386, 100.64509366380),
    (0.00000001436, 4.06045514506, 177.87437278590),
    (0.00000001308, 1.01324076289, 423.67742956920),
    (0.00000001541, 6.03020449918, 292.01284726840),
    (0.00000001307, 5.83815678434, 5863.59120611620),
    (0.00000001613, 2.45074803642, 1049.08698945070),
    (0.00000001249, 3.01518429832, 464.73122651380),
    (0.00000001250, 6.23516728885, 823.99143422340),
    (0.00000001275, 2.68217384213, 637.44960575920),
    (0.00000001249, 2.97028182853, 51749.20809227239),
    (0.00000001240, 2.66940683813, 2700.71514038580),
    (0.00000001456, 1.85558224828, 96.87299909510),
    (0.00000001491, 4.98649587341, 295.19424100610),
    (0.00000001230, 4.27283851216, 12139.55350910680),
    (0.00000001292, 2.73196017809, 10206.17199921020),
    (0.00000001247, 3.77399749791, 504.56118318100),
    (0.00000001408, 1.02955773079, 518.38463239980),
    (0.00000001223, 1.12202093840, 221.16340196420),
    (0.00000001420, 4.39795293289, 606.76018552230),
    (0.00000001190, 1.57292553631, 820.05928096030),
    (0.00000001247, 0.99102599652, 9793.80090233580),
    (0.00000001234, 1.10826361423, 2303.60876781320),
    (0.00000001186, 4.55984967028, 9808.53818466140),
    (0.00000001346, 4.94456950019, 384.05992122310),
    (0.00000001514, 3.60392291730, 2015.67108615980),
    (0.00000001432, 2.28704432909, 525.49817940060),
    (0.00000001129, 0.87100340620, 162.09337010680),
    (0.00000001196, 5.13485214850, 227.31374111850),
    (0.00000001339, 2.48923887712, 206.70681329900),
    (0.00000001421, 1.65379789078, 857.12853501510),
    (0.00000001162, 1.92099315083, 220.93390730060),
    (0.00000001277, 4.85435999187, 54.17467074780),
    (0.00000001153, 5.33028034679, 233.90602325750),
    (0.00000001214, 4.11324721963, 3377.21779200400),
    (0.00000001109, 5.68915582674, 162.89651925890),
    (0.00000001068, 4.85383480876, 611.44309831080),
    (0.00000001119, 1.40805686363, 1987.21689815660),
    (0.00000001085, 0.64208148190, 731.68372783780),
    (0.00000001435, 3.20880139888, 835.78789401270),
    (0.00000001184, 2.99776919968, 199.28444975750),
    (0.00000001281, 3.12245339510, 427.34895040140),
    (0.00000001058, 5.17851282929, 306.09692891810),
    (0.00000001152, 4.39244449554, 199.96577331370),
    (0.00000001036, 3.68027119804, 597.35901666110),
    (0.00000001055, 3.25561743426, 394.35486196160),
    (0.00000001127, 4.33255371960, 552.58551477450),
    (0.00000001213, 6.21447612110, 42.53826965290),
    (0.00000001117, 3.74367882111, 214.19286731530),
    (0.00000001023, 3.84199833949, 894.84087952760),
    (0.00000001042, 5.30120078590, 450.97721326420),
    (0.00000001290, 3.96221234564, 318.83955021140),
    (0.00000001073, 4.10012122884, 188.16931352440),
    (0.00000001204, 0.37702365750, 393.46109008430),
    (0.00000001214, 2.01826978554, 401.32539661050),
    (0.00000001018, 0.02946649279, 2840.41327990860),
    (0.00000001237, 5.41088851225, 425.84743135060),
    (0.00000001187, 5.16511890602, 838.21852822500),
    (0.00000001276, 2.93572146232, 1457.52593306200),
    (0.00000000994, 3.40079885702, 211.60217440860),
    (0.00000001042, 2.42209320898, 361.37781986430),
    (0.00000001093, 3.66289018246, 226.63241756230),
    (0.00000000978, 3.76334208607, 5856.47765911540),
    (0.00000001263, 2.09195268609, 78.71375183040),
    (0.00000001009, 5.85963705048, 1268.74887236410),
    (0.00000001148, 4.39543895068, 570.74476203920),
    (0.00000001051, 3.27272240682, 153.49535039770),
    (0.00000000975, 3.42924642244, 105.54045477340),
    (0.00000000997, 4.30943991893, 212.40532356070),
    (0.00000000954, 3.88548755058, 171.65459766240),
    (0.00000000960, 1.90180005280, 1159.29331067010),
    (0.00000000953, 3.40787141587, 244.79166482700),
    (0.00000000969, 1.93369993197, 525.75881183150),
    (0.00000000918, 1.73738789723, 223.33340374560),
    (0.00000001164, 5.05392864346, 263.70167161710),
    (0.00000000951, 4.23581224839, 92.94084583200),
    (0.00000001160, 5.80630916592, 460.53844081980),
    (0.00000001186, 4.46262000755, 465.95506679120),
    (0.00000000931, 2.09868057209, 205.66428357540),
    (0.00000000942, 3.86810837922, 238.42887735160),
    (0.00000001020, 5.53181822898, 0.04818410980),
    (0.00000000995, 2.03457885490, 6290.18939699220),
    (0.00000000888, 2.60957592990, 1912.57831194120),
    (0.00000000873, 5.78433393020, 480.77286162380),
    (0.00000000854, 1.63255087291, 328.24071907260),
    (0.00000001123, 4.07401922216, 3693.60966166060),
    (0.00000000934, 3.52355235083, 10220.39909321180),
    (0.00000000833, 3.03302227840, 532.87235883230),
    (0.00000001007, 2.73615455688, 4841.85727206680),
    (0.00000000870, 1.06968760644, 51.20572533120),
    (0.00000000891, 1.36817544763, 700.45179087970),
    (0.00000000833, 5.39754715806, 159.71512552120),
    (0.00000000854, 1.91765015557, 622.48879857470),
    (0.00000000976, 3.09106001923, 2332.06295581640),
    (0.00000000819, 5.55683690482, 462.02291352810),
    (0.00000000800, 1.47042677460, 969.62247809490),
    (0.00000000933, 1.40166917666, 287.93768165340),
    (0.00000000784, 1.69235162770, 477.80391620720),
    (0.00000000782, 3.98153416585, 702.14871190910),
    (0.00000000810, 5.87689161549, 561.93429400900),
    (0.00000000858, 4.02964773169, 41.64449777560),
    (0.00000000819, 0.98885784755, 960.22130923370),
    (0.00000000882, 1.49559638306, 760.25553592000),
    (0.00000000767, 2.46787654531, 402.21916848780),
    (0.00000000851, 3.64678001195, 348.63519857100),
    (0.00000000852, 1.03470840672, 2620.00063746980),
    (0.00000000770, 4.67090683753, 16.67477455640),
    (0.00000000849, 5.27994730935, 74.63858621540),
    (0.00000000854, 2.56811257488, 432.74853003030),
    (0.00000000767, 1.11806243753, 2847.52682690940),
    (0.00000000729, 0.44171990710, 898.77303279070),
    (0.00000000776, 5.54603607568, 3171.03224356680),
    (0.00000000721, 6.05392551158, 91.78644152380),
    (0.00000000739, 3.57172839746, 775.23338944700),
    (0.00000000730, 4.98865345688, 705.11765732570),
    (0.00000000705, 0.44942445750, 219.66188291340),
    (0.00000000708, 0.69014726046, 1048.33622992530),
    (0.00000000706, 2.22974712805, 29.20494752860),
    (0.00000000711, 0.00981284716, 2115.58246664070),
    (0.00000000722, 4.14075205197, 225.07850888480),
    (0.00000000735, 1.54083195463, 201.99276274320),
    (0.00000000746, 4.08997409526, 849.26422848890),
    (0.00000000729, 2.81779134868, 419.53282798500),
    (0.00000000837, 1.00844734156, 4127.32139953740),
    (0.00000000939, 0.46037763932, 5488.86810538160),
    (0.00000000939, 1.85473712038, 5062.26991450560),
    (0.00000000721, 1.62872794201, 2200.51599359460),
)

R2 = (
    (0.00436902464, 4.78671673044, 213.29909543800),
    (0.00071922760, 2.50069994874, 206.18554843720),
    (0.00049766792, 4.97168150870, 220.41264243880),
    (0.00043220894, 3.86940443794, 426.59819087600),
    (0.00029645554, 5.96310264282, 7.11354700080),
    (0.00004141650, 4.10670940823, 433.71173787680),
    (0.00004720909, 2.47527992423, 199.07200143640),
    (0.00003789370, 3.09771025067, 639.89728631400),
    (0.00002963990, 1.37206248846, 103.09277421860),
    (0.00002556363, 2.85065721526, 419.48464387520),
    (0.00002208457, 6.27588858707, 110.20632121940),
    (0.00002187621, 5.85545832218, 14.22709400160),
    (0.00001956896, 4.92448618045, 227.52618943960),
    (0.00002326801, 0.00000000000, 0.00000000000),
    (0.00000923840, 5.46392422737, 323.50541665740),
    (0.00000705936, 2.97081280098, 95.97922721780),
    (0.00000546115, 4.12854181522, 412.37109687440),
    (0.00000373838, 5.83435991809, 117.31986822020),
    (0.00000360882, 3.27703082368, 647.01083331480),
    (0.00000356350, 3.19152043942, 210.11770170030),
    (0.00000390627, 4.48106176893, 216.48048917570),
    (0.00000431485, 5.17825414612, 522.57741809380),
    (0.00000325598, 2.26867601656, 853.19638175200),
    (0.00000405018, 4.17294157872, 209.36694217490),
    (0.00000204494, 0.08774848590, 202.25339517410),
    (0.00000206854, 4.02188336738, 735.87651353180),
    (0.00000178474, 4.09716541453, 440.82528487760),
    (0.00000180143, 3.59704903955, 632.78373931320),
    (0.00000153656, 3.13470530382, 625.67019231240),
    (0.00000147779, 0.13614300541, 302.16477565500),
    (0.00000123189, 4.18895309647, 88.86568021700),
    (0.00000133076, 2.59350469420, 191.95845443560),
    (0.00000100367, 5.46056190585, 3.18139373770),
    (0.00000131975, 5.93293968941, 309.27832265580),
    (0.00000097235, 4.01832604356, 728.76296653100),
    (0.00000110709, 4.77853798276, 838.96928775040),
    (0.00000119053, 5.55385105975, 224.34479570190),
    (0.00000093852, 4.38395529912, 217.23124870110),
    (0.00000108701, 5.29310899841, 515.46387109300),
    (0.00000078609, 5.72525447528, 21.34064100240),
    (0.00000081468, 5.10897365253, 956.28915597060),
    (0.00000096412, 6.25859229567, 742.99006053260),
    (0.00000069228, 4.04901237761, 3.93215326310),
    (0.00000065168, 3.77713343518, 1052.26838318840),
    (0.00000064088, 5.81235002453, 529.69096509460),
    (0.00000062541, 2.18445116349, 195.13984817330),
    (0.00000056987, 3.14666549033, 203.00415469950),
    (0.00000055979, 4.84108422860, 234.63973644040),
    (0.00000052940, 5.07780548444, 330.61896365820),
    (0.00000050635, 2.77318570728, 942.06206196900),
    (0.00000041649, 4.79014211005, 63.73589830340),
    (0.00000044858, 0.56460613593, 269.92144674060),
    (0.00000041357, 3.73496404402, 316.39186965660),
    (0.00000052847, 3.92623831484, 949.17560896980),
    (0.00000038398, 3.73966157784, 1045.15483618760),
    (0.00000037583, 4.18924633757, 536.80451209540),
    (0.00000035285, 2.90795856092, 284.14854074220),
    (0.00000033576, 3.80465978802, 149.56319713460),
    (0.00000041073, 4.57870454147, 1155.36115740700),
    (0.00000030412, 2.48140171991, 860.30992875280),
    (0.00000031373, 4.84075951849, 1272.68102562720),
    (0.00000030218, 4.35186294470, 405.25754987360),
    (0.00000039430, 3.50858482049, 422.66603761290),
    (0.00000029658, 1.58886982096, 1066.49547719000),
    (0.00000035202, 5.94478241578, 1059.38193018920),
    (0.00000025829, 3.54946335477, 1368.66025284500),
    (0.00000026283, 4.81567477177, 124.43341522100),
    (0.00000029963, 3.66312205813, 429.77958461370),
    (0.00000033011, 4.96879544579, 831.85574074960),
    (0.00000024305, 5.31133255082, 10.29494073850),
    (0.00000026332, 4.45253273390, 223.59403617650),
    (0.00000022108, 2.76092021113, 415.55249061210),
    (0.00000027187, 1.66347897738, 277.03499374140),
    (0.00000021639, 1.03836302307, 11.04570026390),
    (0.00000019713, 2.52194629263, 1258.45393162560),
    (0.00000017062, 3.27669927228, 654.12438031560),
    (0.00000017261, 3.49414816663, 1361.54670584420),
    (0.00000016097, 1.73396878598, 490.33408917940),
    (0.00000021099, 3.62102032955, 1265.56747862640),
    (0.00000017692, 4.31141612385, 1471.75302706360),
    (0.00000013458, 0.32327889681, 295.05122865420),
    (0.00000012586, 3.13794576887, 74.78159856730),
    (0.00000012023, 2.32917797741, 210.85141488320),
    (0.00000015120, 3.59558424278, 265.98929347750),
    (0.00000012959, 4.62359706368, 1589.07289528380),
    (0.00000015424, 5.01335704925, 127.47179660680),
    (0.00000011193, 4.54981248285, 81.75213321620),
    (0.00000013449, 4.88710089777, 437.64389113990),
    (0.00000010673, 5.05234757424, 191.20769491020),
    (0.00000013963, 3.04990968366, 423.41679713830),
    (0.00000010614, 5.02845923229, 137.03302416240),
    (0.00000014382, 4.68720080027, 1148.24761040620),
    (0.00000013470, 1.90280407135, 408.43894361130),
    (0.00000010077, 5.20426583827, 340.77089204480),
    (0.00000010323, 3.34460279759, 1685.05212250160),
    (0.00000009563, 3.17317920222, 351.81659230870),
    (0.00000011295, 5.47808960704, 1375.77379984580),
    (0.00000008617, 2.81294528041, 99.91138048090),
    (0.00000008460, 3.22691940753, 1677.93857550080),
    (0.00000007914, 2.35624291874, 1574.84580128220),
    (0.00000007587, 6.08171425316, 231.45834270270),
    (0.00000009175, 3.40072244924, 1581.95934828300),
    (0.00000007337, 2.00393601815, 131.40394986990),
    (0.00000008240, 4.04095881407, 1788.14489672020),
    (0.00000007579, 3.68311134272, 846.08283475120),
    (0.00000006691, 4.37253800717, 145.63104387150),
    (0.00000007539, 3.29482043104, 750.10360753340),
    (0.00000006367, 4.00239137708, 447.93883187840),
    (0.00000006249, 4.55603671940, 106.27416795630),
    (0.00000006489, 1.33782087599, 215.74677599280),
    (0.00000006501, 3.78204726337, 313.21047591890),
    (0.00000005978, 0.55276980086, 18.15924726470),
    (0.00000006171, 2.84712795642, 138.51749687070),
    (0.00000006837, 4.83481646949, 319.57326339430),
    (0.00000006678, 5.43046031699, 508.35032409220),
    (0.00000007175, 4.37855723752, 1464.63948006280),
    (0.00000005753, 4.14268749228, 543.91805909620),
    (0.00000005727, 4.35383078313, 1905.46476494040),
    (0.00000005101, 2.63866058897, 288.08069400530),
    (0.00000005311, 3.62520849510, 6076.89030155420),
    (0.00000005498, 4.19972735173, 721.64941953020),
    (0.00000005089, 5.04845206653, 10007.09999777380),
    (0.00000005505, 1.13479635941, 56.62235130260),
    (0.00000004820, 3.30043078578, 76.26607127560),
    (0.00000004915, 6.17790518458, 483.22054217860),
    (0.00000005048, 2.44627820757, 628.85158605010),
    (0.00000004534, 1.19648682598, 200.76892246580),
    (0.00000004817, 3.11549733365, 2001.44399215820),
    (0.00000004712, 1.26507812515, 6062.66320755260),
    (0.00000004811, 5.78388270496, 184.84490743480),
    (0.00000004775, 0.76197795755, 333.65734504400),
    (0.00000004514, 0.95293919611, 343.21857259960),
    (0.00000004525, 2.68827745072, 9992.87290377220),
    (0.00000004378, 0.80241129896, 222.86032299360),
    (0.00000004873, 5.92092913946, 618.55664531160),
    (0.00000004142, 1.91878383159, 497.44763618020),
    (0.00000005112, 4.50449287745, 416.30325013750),
    (0.00000004125, 1.98204847532, 347.88443904560),
    (0.00000004045, 2.87666810085, 38.13303563780),
    (0.00000004133, 2.90478811425, 107.02492748170),
    (0.00000004035, 2.92972681787, 1994.33044515740),
    (0.00000004916, 3.12316267561, 1898.35121793960),
    (0.00000003657, 3.24680246734, 362.86229257260),
    (0.00000003753, 0.87719890943, 703.63318461740),
    (0.00000003576, 3.48080143501, 388.46515523820),
    (0.00000003555, 4.08436297683, 430.53034413910),
    (0.00000003598, 0.05255328597, 32.24332891440),
    (0.00000003561, 5.46414552453, 6283.07584999140),
    (0.00000003480, 1.81622589595, 70.84944530420),
    (0.00000003827, 3.12041228490, 635.96513305090),
    (0.00000003399, 0.54882815021, 10213.28554621100),
    (0.00000003399, 3.51833356080, 629.60234557550),
    (0.00000003364, 3.27821747958, 357.44566660120),
    (0.00000003260, 1.97623748027, 203.73786788240),
    (0.00000003118, 2.18465627368, 1891.23767093880),
    (0.00000003163, 1.26040995242, 134.58534360760),
    (0.00000004004, 5.45434102599, 1692.16566950240),
    (0.00000003180, 2.46319174788, 867.42347575360),
    (0.00000003389, 4.20503159673, 337.73251065900),
    (0.00000003026, 2.19331614526, 217.96496188400),
    (0.00000003573, 5.55097240810, 113.38771495710),
    (0.00000003682, 3.78966280284, 2104.53676637680),
    (0.00000003125, 4.09203641264, 1478.86657406440),
    (0.00000002881, 3.90810650240, 312.19908396260),
    (0.00000003199, 3.92123638342, 1038.04128918680),
    (0.00000004014, 5.17826893553, 404.50679034820),
    (0.00000003907, 4.11767191780, 1781.03134971940),
    (0.00000003144, 1.61185684069, 1073.60902419080),
    (0.00000003072, 5.00675625396, 312.45971639350),
    (0.00000003034, 5.46288652854, 258.87574647670),
    (0.00000002884, 2.38477237305, 181.05576652360),
    (0.00000002986, 0.88783591586, 1279.79457262800),
    (0.00000002683, 0.00956197492, 195.89060769870),
    (0.00000003081, 5.60034737330, 216.21985674480),
    (0.00000002626, 6.12701960244, 273.10284047830),
    (0.00000002665, 2.31576422128, 565.11568774670),
    (0.00000003245, 3.87540558646, 85.82729883120),
    (0.00000002740, 5.73784096806, 160.60889739850),
    (0.00000002876, 4.74720607366, 213.25091132820),
    (0.00000002523, 5.30458920892, 444.75743814070),
    (0.00000002752, 5.08984539930, 1169.58825140860),
    (0.00000002889, 1.66674437398, 213.34727954780),
    (0.00000002923, 4.21481009033, 650.94298657790),
    (0.00000003036, 2.55426675350, 6069.77675455340),
    (0.00000003116, 2.67220972004, 52.69019803950),
    (0.00000002371, 0.89591351822, 121.25202148330),
    (0.00000002993, 3.96957827454, 9999.98645077300),
    (0.00000003088, 0.40656113014, 561.18353448360),
    (0.00000002385, 4.74063881551, 218.71572140940),
    (0.00000002632, 1.12706218927, 344.70304530790),
    (0.00000002316, 4.08445262041, 131.54696222180),
    (0.00000002214, 3.37726228553, 22.09140052780),
    (0.00000002129, 3.32497715011, 358.93013930950),
    (0.00000002679, 1.68971401870, 208.63322899200),
    (0.00000002607, 5.10250482155, 824.74219374880),
    (0.00000002250, 2.60474848767, 305.34616939270),
    (0.00000002087, 3.37293958793, 320.32402291970),
    (0.00000002693, 3.62159456470, 436.89313161450),
    (0.00000002492, 2.96129217279, 2214.74308759620),
    (0.00000002704, 2.88483697319, 643.07868005170),
    (0.00000002124, 1.61210282593, 218.92816973050),
    (0.00000002037, 4.63481160778, 188.02630117250),
    (0.00000002394, 3.46386258552, 6275.96230299060),
    (0.00000001973, 2.28886138203, 2627.11418447060),
    (0.00000001937, 5.67082364247, 28.45418800320),
    (0.00000001920, 4.25647211328, 546.95644048200),
    (0.00000002498, 3.57572154405, 2420.92863603340),
    (0.00000001898, 1.30987536388, 212.33588759150),
    (0.00000001852, 1.58508015515, 424.15051032120),
    (0.00000001850, 3.57830449726, 329.72519178090),
    (0.00000002128, 3.95329215734, 1795.25844372100),
    (0.00000002236, 4.22073549375, 2221.85663459700),
    (0.00000001933, 1.68771499202, 350.33211960040),
    (0.00000001799, 2.06541260431, 144.14657116320),
    (0.00000001904, 4.60953896857, 182.27960680100),
    (0.00000002236, 5.17945392885, 99.16062095550),
    (0.00000001755, 2.73425330428, 291.26208774300),
    (0.00000002231, 5.42548168745, 207.88246946660),
    (0.00000001848, 2.24194286719, 168.05251279940),
    (0.00000001726, 1.31878655393, 219.44943459230),
    (0.00000001709, 5.55913931846, 92.79783348010),
    (0.00000001693, 1.95360003617, 129.91947716160),
    (0.00000002064, 4.84900344498, 1141.13406340540),
    (0.00000001758, 5.05088656436, 214.26230328450),
    (0.00000001781, 2.85880153340, 636.71589257630),
    (0.00000001900, 2.90295578617, 2310.72231481400),
    (0.00000001759, 5.34657858395, 45.57665103870),
    (0.00000001654, 6.14450664508, 554.06998748280),
    (0.00000001578, 4.50941374663, 210.37833413120),
    (0.00000001681, 3.55136706992, 1354.43315884340),
    (0.00000001862, 3.01276783582, 2317.83586181480),
    (0.00000001589, 1.15773448350, 235.39049596580),
    (0.00000001551, 2.15558953807, 207.67002114550),
    (0.00000001874, 4.12861627986, 225.82926841020),
    (0.00000001621, 3.29992957653, 1670.82502850000),
    (0.00000001911, 0.17724319140, 12.53017297220),
    (0.00000001477, 5.90270260570, 1.48447270830),
    (0.00000001618, 5.72513459206, 1485.98012106520),
    (0.00000001446, 1.78104589920, 1382.88734684660),
    (0.00000001683, 3.43534671475, 2428.04218303420),
    (0.00000001542, 5.51223038941, 204.70107572890),
    (0.00000001420, 2.07339356364, 198.32124191100),
    (0.00000001444, 5.56032454849, 128.36556848410),
    (0.00000001476, 6.12782257368, 212.77783057620),
    (0.00000001474, 0.33626790634, 213.82036029980),
    (0.00000001428, 3.25039966249, 945.99421523210),
    (0.00000001410, 0.68747644676, 429.04587143080),
    (0.00000001752, 2.70090942746, 12.74262129330),
    (0.00000001681, 4.97526853273, 2008.55753915900),
    (0.00000001408, 0.80461100746, 1585.14074202070),
    (0.00000001485, 0.49674043855, 120.35824960600),
    (0.00000001490, 2.68459799437, 207.14875628370),
    (0.00000001411, 4.36399216092, 5863.59120611620),
    (0.00000001315, 4.73430848989, 241.75328344120),
    (0.00000001516, 4.99488503706, 1162.47470440780),
    (0.00000001310, 1.98714265058, 563.63121503840),
    (0.00000001286, 2.12891372062, 251.43213107580),
    (0.00000001271, 5.70165238307, 2.92076130680),
    (0.00000001312, 1.68811514551, 2207.62954059540),
    (0.00000001259, 0.35924965717, 334.55111692130),
    (0.00000001252, 2.14513440216, 1055.44977692610),
    (0.00000001401, 6.13250261735, 1802.37199072180),
    (0.00000001343, 5.79995727295, 9793.80090233580),
    (0.00000001228, 3.29059284057, 661.23792731640),
    (0.00000001202, 2.88792018909, 2413.81508903260),
    (0.00000001286, 5.72360160371, 298.23262239190),
    (0.00000001357, 0.93175963411, 217.49188113200),
    (0.00000001356, 2.28121627817, 601.76425067620),
    (0.00000001190, 1.94993809928, 501.37978944330),
    (0.00000001304, 0.37337923280, 3473.19701922180),
    (0.00000001350, 2.87235622320, 142.44965013380),
    (0.00000001349, 3.21102203937, 175.16605980020),
    (0.00000001312, 3.70149813509, 2111.65031337760),
    (0.00000001129, 1.08860603834, 842.15068148810),
    (0.00000001237, 0.08698781252, 526.50957135690),
    (0.00000001217, 3.89835349840, 209.10630974400),
    (0.00000001467, 1.16228775027, 621.73803904930),
    (0.00000001044, 0.30512759901, 436.15941843160),
    (0.00000001140, 5.33720637097, 114.13847448250),
    (0.00000001295, 4.70261675421, 9786.68735533500),
    (0.00000001037, 4.07846687083, 156.67674413540),
    (0.00000001391, 4.73554028436, 398.14400287280),
    (0.00000001167, 5.68899703631, 479.28838891550),
    (0.00000001035, 5.34279429465, 327.43756992050),
    (0.00000000997, 1.19323192891, 710.74673161820),
    (0.00000001193, 5.17722376816, 98.89998852460),
    (0.00000001165, 4.58588490135, 732.69511979410),
    (0.00000001161, 4.90854984994, 10206.17199921020),
    (0.00000001144, 0.50394784140, 3906.90875709860),
    (0.00000001182, 3.69482624364, 2854.64037391020),
    (0.00000000970, 2.89031410383, 1987.21689815660),
    (0.00000001039, 0.48694895443, 525.49817940060),
    (0.00000001079, 3.61750956217, 2097.42321937600),
    (0.00000001148, 3.31015591733, 5856.47765911540),
    (0.00000001241, 4.31971543677, 230.70758317730),
    (0.00000000910, 4.59825926062, 380.12776796000),
    (0.00000000907, 1.34912454077, 685.47393735270),
    (0.00000001166, 1.61085609717, 5849.36411211460),
    (0.00000000882, 6.12045540405, 519.39602435610),
    (0.00000000963, 4.96065454054, 699.70103135430),
    (0.00000001062, 5.13323858077, 2751.54759969160),
    (0.00000000865, 6.12821112133, 245.54242435240),
    (0.00000001100, 2.18435744407, 1699.27921650320),
    (0.00000000822, 5.55083534581, 739.05790726950),
    (0.00000000926, 2.01158276144, 417.03696332040),
    (0.00000000813, 5.18401872205, 214.78356814630),
    (0.00000001033, 5.48677848094, 3995.77443731560),
    (0.00000000872, 3.02363724703, 306.09692891810),
    (0.00000000796, 0.44343664540, 486.40193591630),
    (0.00000000878, 1.82164034386, 135.33610313300),
    (0.00000000791, 2.14989417962, 2620.00063746980),
    (0.00000000881, 2.39697554334, 289.56516671360),
    (0.00000000782, 4.50471317138, 980.66817835880),
    (0.00000000783, 1.14229319753, 540.73666535850),
    (0.00000000831, 0.69937251013, 421.93232443000),
    (0.00000000770, 2.40292326155, 576.16138801060),
    (0.00000000950, 5.97621460162, 196.62432088160),
    (0.00000000814, 4.19303098086, 831.10498122420),
    (0.00000000969, 4.78071024754, 326.68681039510),
    (0.00000000760, 0.44860533530, 425.63498302950),
    (0.00000000907, 0.94781730418, 525.75881183150),
    (0.00000000788, 0.14287187051, 916.93228005540),
    (0.00000000801, 1.86383119100, 3039.48528134500),
    (0.00000000801, 0.46947170994, 3466.08347222100),
    (0.00000000747, 6.05374861925, 211.81462272970),
    (0.00000000968, 3.02618272726, 2634.22773147140),
    (0.00000000739, 2.27110740297, 2303.60876781320),
    (0.00000000750, 5.48554383902, 173.94221952280),
    (0.00000001024, 1.91564925560, 229.97386999440),
    (0.00000000816, 4.98990432666, 4209.07353275360),
    (0.00000000728, 1.30997967935, 511.53171782990),
    (0.00000000716, 3.74192651696, 3053.71237534660),
    (0.00000000727, 0.39191881243, 1493.09366806600),
    (0.00000000717, 2.68899513085, 228.27694896500),
    (0.00000000739, 2.12749199443, 1176.70179840940),
    (0.00000000805, 0.07187193910, 556.51766803760),
    (0.00000000835, 3.48287855700, 84.93352695390),
    (0.00000000790, 0.48073040004, 4017.11507831800),
    (0.00000000725, 1.96643065215, 220.46082654860),
    (0.00000000683, 2.68825142163, 151.04766984290),
    (0.00000000739, 3.33688408107, 953.10776223290),
    (0.00000000745, 6.22304530635, 1269.49963188950),
)

R3 = (
    (0.00020315005, 3.02186626038, 213.29909543800),
    (0.00008923581, 3.19144205755, 220.41264243880),
    (0.00006908677, 4.35174889353, 206.18554843720),
    (0.00004087129, 4.22406927376, 7.11354700080),
    (0.00003879041, 2.01056445995, 426.59819087600),
    (0.00001070788, 4.20360341236, 199.07200143640),
    (0.00000907332, 2.28344368029, 433.71173787680),
    (0.00000606121, 3.17458570534, 227.52618943960),
    (0.00000596639, 4.13455753351, 14.22709400160),
    (0.00000483181, 1.17345973258, 639.89728631400),
    (0.00000393174, 0.00000000000, 0.00000000000),
    (0.00000229472, 4.69838526383, 419.48464387520),
    (0.00000188250, 4.59003889007, 110.20632121940),
    (0.00000149508, 3.20199444400, 103.09277421860),
    (0.00000121442, 3.76831374104, 323.50541665740),
    (0.00000101215, 5.81884137755, 412.37109687440),
    (0.00000102146, 4.70974422803, 95.97922721780),
    (0.00000093078, 1.43531270909, 647.01083331480),
    (0.00000072601, 4.15395598507, 117.31986822020),
    (0.00000084347, 2.63462379693, 216.48048917570),
    (0.00000062198, 2.31239345505, 440.82528487760),
    (0.00000045145, 4.37317047297, 191.95845443560),
    (0.00000049536, 2.38854232908, 209.36694217490),
    (0.00000054829, 0.30526468471, 853.19638175200),
    (0.00000040498, 1.83836569765, 302.16477565500),
    (0.00000038089, 5.94455115525, 88.86568021700),
    (0.00000032243, 4.01146349387, 21.34064100240),
    (0.00000040671, 0.68845183210, 522.57741809380),
    (0.00000028209, 5.77193013961, 210.11770170030),
    (0.00000024976, 3.06249709014, 234.63973644040),
    (0.00000020824, 4.92570695678, 625.67019231240),
    (0.00000025070, 0.73137425284, 515.46387109300),
    (0.00000017485, 5.73135068691, 728.76296653100),
    (0.00000018009, 1.45593152612, 309.27832265580),
    (0.00000016927, 3.52771580455, 3.18139373770),
    (0.00000013437, 3.36479898106, 330.61896365820),
    (0.00000011090, 3.37212682914, 224.34479570190),
    (0.00000011082, 3.41719974793, 956.28915597060),
    (0.00000009978, 1.58791582772, 202.25339517410),
    (0.00000011551, 5.99093726182, 735.87651353180),
    (0.00000010500, 6.06911092266, 405.25754987360),
    (0.00000009144, 2.93557421591, 124.43341522100),
    (0.00000008737, 4.65432480769, 632.78373931320),
    (0.00000010023, 0.58247011625, 860.30992875280),
    (0.00000007482, 4.50669216436, 942.06206196900),
    (0.00000010091, 0.28268774007, 838.96928775040),
    (0.00000009243, 2.57034547708, 223.59403617650),
    (0.00000008652, 1.75808100881, 429.77958461370),
    (0.00000007564, 1.45635107202, 654.12438031560),
    (0.00000007058, 5.47394786065, 1045.15483618760),
    (0.00000006970, 1.51811695028, 422.66603761290),
    (0.00000008067, 4.48457709292, 742.99006053260),
    (0.00000006817, 4.83084424818, 316.39186965660),
    (0.00000007693, 0.43769724671, 831.85574074960),
    (0.00000007934, 4.20112367712, 195.13984817330),
    (0.00000006119, 2.33960392135, 269.92144674060),
    (0.00000005589, 1.14518720694, 284.14854074220),
    (0.00000005564, 4.18123189068, 529.69096509460),
    (0.00000005034, 2.12020038657, 295.05122865420),
    (0.00000006556, 3.42459866876, 10.29494073850),
    (0.00000005544, 2.46823271699, 536.80451209540),
    (0.00000006189, 6.01433827520, 1066.49547719000),
    (0.00000005649, 0.82784598388, 217.23124870110),
    (0.00000004264, 3.23245736673, 1272.68102562720),
    (0.00000004450, 0.92477808590, 203.00415469950),
    (0.00000003268, 4.32777516976, 1258.45393162560),
    (0.00000003655, 0.05832123987, 81.75213321620),
    (0.00000003951, 0.11124996745, 1155.36115740700),
    (0.00000003773, 6.01157059552, 1052.26838318840),
    (0.00000002915, 5.64342950039, 3.93215326310),
    (0.00000003019, 2.19411778004, 447.93883187840),
    (0.00000002977, 1.89387342550, 149.56319713460),
    (0.00000003146, 0.19215180096, 1148.24761040620),
    (0.00000002763, 0.92363342001, 508.35032409220),
    (0.00000002790, 4.97199778427, 1677.93857550080),
    (0.00000002608, 2.99591016813, 1589.07289528380),
    (0.00000002881, 5.40535671721, 1361.54670584420),
    (0.00000002337, 1.30362271569, 184.84490743480),
    (0.00000002536, 3.71412120849, 408.43894361130),
    (0.00000002450, 3.22118361135, 319.57326339430),
    (0.00000002585, 2.31346415454, 543.91805909620),
    (0.00000002324, 5.87500715503, 721.64941953020),
    (0.00000001990, 0.51565577383, 416.30325013750),
    (0.00000002490, 4.24017800021, 1059.38193018920),
    (0.00000001935, 2.41463084855, 337.73251065900),
    (0.00000001886, 0.53809070779, 635.96513305090),
    (0.00000001893, 5.62352727352, 11.04570026390),
    (0.00000002389, 5.73399981234, 313.21047591890),
    (0.00000001900, 2.41000566465, 131.54696222180),
    (0.00000001743, 4.57646237847, 1994.33044515740),
    (0.00000001913, 5.17436386408, 2854.64037391020),
    (0.00000001946, 6.23355845623, 1471.75302706360),
    (0.00000001963, 6.17814558628, 1464.63948006280),
    (0.00000001838, 5.59464577559, 1038.04128918680),
    (0.00000001541, 0.60765337379, 210.85141488320),
    (0.00000001617, 1.75479346067, 195.89060769870),
    (0.00000001577, 0.55789908488, 2324.94940881560),
    (0.00000001492, 0.26624235633, 497.44763618020),
    (0.00000001659, 2.57526072926, 2090.30967237520),
    (0.00000001809, 1.82317819973, 436.89313161450),
    (0.00000001566, 6.15328100324, 490.33408917940),
    (0.00000001771, 6.11741716855, 1073.60902419080),
    (0.00000001456, 0.85374460914, 415.55249061210),
    (0.00000001645, 2.95335775161, 437.64389113990),
    (0.00000001391, 4.12025028560, 1574.84580128220),
    (0.00000001585, 5.96841377266, 1781.03134971940),
    (0.00000001507, 3.84895122542, 1251.34038462480),
    (0.00000001442, 5.32547705924, 2538.24850425360),
    (0.00000001805, 1.50973093681, 750.10360753340),
    (0.00000001462, 3.28599831588, 1884.12412393800),
    (0.00000001482, 0.99340744053, 643.07868005170),
    (0.00000001312, 3.79347668996, 1567.73225428140),
    (0.00000001665, 0.02551523913, 423.41679713830),
    (0.00000001469, 5.35285153471, 1354.43315884340),
    (0.00000001352, 0.69945139243, 867.42347575360),
    (0.00000001124, 1.79624810407, 618.55664531160),
    (0.00000001126, 4.70052329245, 113.38771495710),
    (0.00000001122, 3.95537224270, 1891.23767093880),
    (0.00000001458, 1.50198846753, 430.53034413910),
    (0.00000001145, 5.13093399117, 25.27279426550),
    (0.00000001178, 2.97062300389, 241.75328344120),
    (0.00000001274, 2.29089799814, 2420.92863603340),
    (0.00000001071, 0.04888943982, 63.73589830340),
    (0.00000001377, 5.58271514873, 1382.88734684660),
    (0.00000001145, 3.10797488346, 2200.51599359460),
    (0.00000001076, 0.79465514815, 127.47179660680),
    (0.00000001046, 5.85060227045, 215.74677599280),
    (0.00000001082, 3.72589445510, 131.40394986990),
    (0.00000001218, 0.47504349592, 824.74219374880),
    (0.00000001116, 3.78039049056, 1375.77379984580),
    (0.00000000969, 5.90752273481, 265.98929347750),
    (0.00000001230, 1.41325962069, 2634.22773147140),
    (0.00000001070, 4.80334493874, 1987.21689815660),
    (0.00000000946, 6.25968535931, 2015.67108615980),
    (0.00000001030, 1.08973644893, 362.86229257260),
    (0.00000001072, 5.41838042079, 1279.79457262800),
    (0.00000000880, 1.92224908504, 483.22054217860),
    (0.00000000878, 2.96591300878, 934.94851496820),
    (0.00000000879, 2.65659265685, 145.63104387150),
    (0.00000000872, 6.26261969664, 2.44768055480),
    (0.00000001082, 4.48298283322, 2214.74308759620),
    (0.00000000959, 0.74479087918, 16.67477455640),
    (0.00000001035, 4.05664979327, 231.45834270270),
    (0.00000000851, 0.09360495322, 628.85158605010),
    (0.00000000888, 5.98816755324, 2524.02141025200),
    (0.00000000866, 3.16259265630, 2207.62954059540),
    (0.00000000843, 1.23731248821, 74.78159856730),
    (0.00000000809, 2.89742868175, 2008.55753915900),
    (0.00000000779, 2.28434811609, 1478.86657406440),
    (0.00000000990, 5.32604038017, 2428.04218303420),
    (0.00000000795, 2.38178135810, 2228.97018159780),
    (0.00000000765, 4.70033674940, 1670.82502850000),
    (0.00000001024, 4.23352869513, 1802.37199072180),
    (0.00000000831, 5.87457134912, 1368.66025284500),
    (0.00000000717, 5.92144324994, 1685.05212250160),
    (0.00000000772, 1.15596098579, 3053.71237534660),
    (0.00000000691, 3.13193109668, 56.62235130260),
)

R4 = (
    (0.00001202050, 1.41499446465, 220.41264243880),
    (0.00000707796, 1.16153570102, 213.29909543800),
    (0.00000516121, 6.23973568330, 206.18554843720),
    (0.00000426664, 2.46924890293, 7.11354700080),
    (0.00000267736, 0.18659206741, 426.59819087600),
    (0.00000170171, 5.95926972384, 199.07200143640),
    (0.00000145113, 1.44211060143, 227.52618943960),
    (0.00000150339, 0.47970167140, 433.71173787680),
    (0.00000121033, 2.40527320817, 14.22709400160),
    (0.00000047332, 5.56857488676, 639.89728631400),
    (0.00000015745, 2.90112466278, 110.20632121940),
    (0.00000016668, 0.52920774279, 440.82528487760),
    (0.00000018954, 5.85626429118, 647.01083331480),
    (0.00000014074, 1.30343550656, 412.37109687440),
    (0.00000012708, 2.09349305926, 323.50541665740),
    (0.00000014724, 0.29905316786, 419.48464387520),
    (0.00000011133, 2.46304825990, 117.31986822020),
    (0.00000011320, 0.21785507019, 95.97922721780),
    (0.00000009233, 2.28127318068, 21.34064100240),
    (0.00000009246, 1.56496312830, 88.86568021700),
    (0.00000008970, 0.68301278041, 216.48048917570),
    (0.00000007674, 3.59367715368, 302.16477565500),
    (0.00000007823, 4.48688804175, 853.19638175200),
    (0.00000008360, 1.27239488455, 234.63973644040),
    (0.00000009552, 3.14159265359, 0.00000000000),
    (0.00000004834, 2.58836294602, 515.46387109300),
    (0.00000006059, 5.16774448740, 103.09277421860),
    (0.00000004410, 0.02211643085, 191.95845443560),
    (0.00000004364, 1.59622746023, 330.61896365820),
    (0.00000003676, 3.29899839673, 210.11770170030),
    (0.00000004364, 5.97349927933, 654.12438031560),
    (0.00000004447, 4.97415112184, 860.30992875280),
    (0.00000003220, 2.72684237392, 522.57741809380),
    (0.00000004005, 1.59858435636, 405.25754987360),
    (0.00000003099, 0.75235436533, 209.36694217490),
    (0.00000002464, 1.19167306488, 124.43341522100),
    (0.00000003088, 1.32258934286, 728.76296653100),
    (0.00000002220, 3.28087994088, 203.00415469950),
    (0.00000002127, 6.14648095022, 429.77958461370),
    (0.00000002110, 0.75462855247, 295.05122865420),
    (0.00000002020, 3.89394929749, 1066.49547719000),
    (0.00000002248, 0.49319150178, 447.93883187840),
    (0.00000002180, 0.72761059998, 625.67019231240),
    (0.00000001809, 0.09057839517, 942.06206196900),
    (0.00000001672, 1.39635398184, 224.34479570190),
    (0.00000001641, 3.02468307550, 184.84490743480),
    (0.00000001772, 0.81879250825, 223.59403617650),
    (0.00000001902, 2.00472814984, 831.85574074960),
    (0.00000001600, 5.41185167676, 824.74219374880),
    (0.00000001505, 5.95520747253, 422.66603761290),
    (0.00000001133, 1.11512973946, 838.96928775040),
    (0.00000001190, 1.89600567803, 956.28915597060),
    (0.00000001487, 2.11906469507, 529.69096509460),
    (0.00000001409, 0.72254420236, 536.80451209540),
    (0.00000001125, 0.89062692183, 721.64941953020),
    (0.00000001301, 1.64867038984, 17.40848773930),
    (0.00000001164, 5.96957981840, 195.13984817330),
    (0.00000000950, 5.36080713290, 316.39186965660),
    (0.00000000985, 3.05768671768, 1574.84580128220),
    (0.00000001050, 1.59202481523, 735.87651353180),
    (0.00000000817, 4.92838813598, 56.62235130260),
    (0.00000000780, 2.72125404102, 508.35032409220),
    (0.00000000969, 1.00708261792, 1045.15483618760),
    (0.00000000716, 1.11042181341, 1169.58825140860),
)
# fmt: on

L = (L0, L1, L2, L3, L4, L5)
B = (B0, B1, B2, B3, B4, B5)
R = (R0, R1, R2, R3, R4)
